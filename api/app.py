"""
FastAPI application exposing the course report over HTTP.

Run:
    python -m api.app
    uvicorn api.app:app --reload

Endpoints:
    POST /courses
        body:    {"student_id": "...", "exams": [{"student_id": "...", "course": "..."}, ...]}
        returns: {"student_id": str, "courses": [str, ...]}   (sorted, same as the CLI)
    GET /health
        returns: {"status": "ok"}

Malformed bodies are rejected by pydantic with 422. Logs each request's hit
count and wall-clock time to stderr.
"""

import logging
import time

import uvicorn
from fastapi import FastAPI
from pydantic import BaseModel, StrictStr

from exams.config import API_HOST, API_PORT, setup_logging
from exams.records import ExamDocument, ExamRecord
from exams.report import courses_for_student

log = logging.getLogger("api")

app = FastAPI(title="Exam Course Report")


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------

class CoursesRequest(BaseModel):
    student_id: StrictStr
    exams: list[ExamRecord]


class CoursesResponse(BaseModel):
    student_id: str
    courses: list[str]


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/courses", response_model=CoursesResponse)
def courses(req: CoursesRequest) -> CoursesResponse:
    t0 = time.perf_counter()

    document = ExamDocument(exams=req.exams)
    result = courses_for_student(document, req.student_id)

    elapsed = time.perf_counter() - t0
    log.info("student_id=%r  hits=%d  %.4fs", req.student_id, len(result), elapsed)

    return CoursesResponse(student_id=req.student_id, courses=result)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    setup_logging(level="INFO")
    port = int(API_PORT)
    log.info("=== Exam Course Report: serving on http://%s:%d ===", API_HOST, port)
    uvicorn.run(app, host=API_HOST, port=port, reload=False)
