import logging

import pytest

from exams import config


SAMPLE_DOCUMENT = (
    '{"exams":['
    '{"student_id":"42","course":"Biology"},'
    '{"student_id":"7","course":"Art"},'
    '{"student_id":"42","course":"Algebra"}'
    ']}'
)


@pytest.fixture
def sample_text():
    """The three-record document from the reference scenario."""
    return SAMPLE_DOCUMENT


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging() so streams don't leak between tests."""
    yield
    root = logging.getLogger()
    for handler in config._installed:
        root.removeHandler(handler)
        handler.close()
    config._installed.clear()
