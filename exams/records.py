"""
Exam record model and document parsing.

Input shape:
    {"exams": [{"student_id": "42", "course": "Biology", ...}, ...]}

Parsing happens in two stages so the two failure kinds stay distinct:
    1. json.loads            → ParseError on malformed JSON
    2. pydantic validation   → RecordError on a well-formed but wrong shape

Both fields of a record are required strings. No coercion: a numeric
student_id is rejected instead of silently never matching.

Public API:
    parse_document(text)   → ExamDocument
    read_document(stream)  → ExamDocument
"""

import json
import logging
from typing import TextIO

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class ExamDataError(Exception):
    """Base class for unusable input data."""


class ParseError(ExamDataError):
    """The input is not well-formed JSON."""


class RecordError(ExamDataError):
    """The JSON is well formed but is not an exams document."""


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------

class ExamRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    student_id: StrictStr
    course: StrictStr


class ExamDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    exams: list[ExamRecord]


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def _describe(err: ValidationError) -> str:
    """Flatten pydantic errors into 'exams.2.course: Field required; ...'."""
    parts = []
    for e in err.errors():
        where = ".".join(str(p) for p in e["loc"]) or "document"
        parts.append(f"{where}: {e['msg']}")
    return "; ".join(parts)


def parse_document(text: str) -> ExamDocument:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(
            f"input is not valid JSON: {e.msg} (line {e.lineno}, column {e.colno})"
        ) from e
    except RecursionError as e:
        raise ParseError("input is not valid JSON: nested too deeply") from e

    try:
        document = ExamDocument.model_validate(data)
    except ValidationError as e:
        raise RecordError(f"invalid exams document: {_describe(e)}") from e

    log.debug("Parsed %d exam records.", len(document.exams))
    return document


def read_document(stream: TextIO) -> ExamDocument:
    """Read the whole stream, then parse it. No partial parse is attempted."""
    try:
        text = stream.read()
    except UnicodeDecodeError as e:
        raise ParseError(f"input is not valid UTF-8: {e.reason} at byte {e.start}") from e
    return parse_document(text)
