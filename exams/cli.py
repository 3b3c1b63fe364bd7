"""
Command-line entry point.

    exam-courses <student_id> < exams.json

Reads one exams document from stdin and prints the matching course names,
sorted, one per line.

Exit status:
    0  success, including no matching records
    1  stdin is not valid JSON or not a valid exams document
    2  usage error (missing or extra arguments), raised by argparse
"""

import argparse
import logging
import sys
from typing import TextIO

from exams.config import setup_logging
from exams.records import ExamDataError, read_document
from exams.report import courses_for_student, render

EXIT_OK         = 0
EXIT_DATA_ERROR = 1
EXIT_USAGE      = 2

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exam-courses",
        description="List the courses a student sat exams for, read from a JSON document on stdin.",
    )
    parser.add_argument("student_id", help="identifier to match exactly against each record's student_id")
    return parser


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()

    if stdin is None:
        sys.stdin.reconfigure(encoding="utf-8")
        stdin = sys.stdin
    if stdout is None:
        sys.stdout.reconfigure(encoding="utf-8")
        stdout = sys.stdout

    try:
        document = read_document(stdin)
    except ExamDataError as e:
        log.error("%s", e)
        return EXIT_DATA_ERROR

    courses = courses_for_student(document, args.student_id)
    stdout.write(render(courses))
    stdout.flush()
    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
