"""Tests for logging configuration."""

import logging

from loguru import logger

from fitness_tracker.core.logging import (
    InterceptHandler,
    add_trace_id,
    intercept_standard_logging,
)
from fitness_tracker.core.trace_context import trace_id_context


def test_add_trace_id_without_context():
    """Records outside a request get a placeholder trace_id."""
    record = {"extra": {}}

    assert add_trace_id(record) is True
    assert record["extra"]["trace_id"] == "N/A"


def test_add_trace_id_with_context():
    token = trace_id_context.set("trace-123")
    try:
        record = {"extra": {}}
        add_trace_id(record)
    finally:
        trace_id_context.reset(token)

    assert record["extra"]["trace_id"] == "trace-123"


def test_intercept_handler_forwards_to_loguru():
    messages = []
    sink_id = logger.add(messages.append, level="INFO", format="{message}")
    try:
        record = logging.LogRecord(
            name="uvicorn",
            level=logging.WARNING,
            pathname=__file__,
            lineno=1,
            msg="port %s in use",
            args=(8000,),
            exc_info=None,
        )
        InterceptHandler().emit(record)
    finally:
        logger.remove(sink_id)

    assert any("port 8000 in use" in message for message in messages)


def test_intercept_standard_logging_replaces_uvicorn_handlers():
    intercept_standard_logging()

    uvicorn_logger = logging.getLogger("uvicorn.access")
    assert len(uvicorn_logger.handlers) == 1
    assert isinstance(uvicorn_logger.handlers[0], InterceptHandler)
    assert uvicorn_logger.propagate is False
