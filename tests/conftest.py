"""Pytest fixtures for the tooncodec test suite."""

import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Restore loguru's default sink after each test."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def tasks_document():
    return {
        "user": "Sam",
        "tasks": [
            {"id": 1, "done": False},
            {"id": 2, "done": True},
        ],
    }


@pytest.fixture
def tasks_text():
    return "user: Sam\ntasks:\n  items[2]{id,done}:\n    1,false\n    2,true"
