from exams.cli import run

run()
