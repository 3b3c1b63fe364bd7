"""
Course report: filter exam records by student and list their courses.

Matching is exact string equality on student_id: no case folding, no
whitespace trimming. Courses are collected in input order, then sorted by
plain string ordering. Duplicate course names are kept.
"""

import logging

from exams.records import ExamDocument

log = logging.getLogger(__name__)


def courses_for_student(document: ExamDocument, student_id: str) -> list[str]:
    """Return the sorted course names of every record whose student_id matches."""
    result = []
    for exam in document.exams:
        if exam.student_id == student_id:
            result.append(exam.course)

    log.info("student_id=%r  records=%d  hits=%d", student_id, len(document.exams), len(result))
    return sorted(result)


def render(courses: list[str]) -> str:
    """Render courses one per line, each terminated by a newline."""
    return "".join(f"{course}\n" for course in courses)
