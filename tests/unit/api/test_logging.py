"""Tests for stdlib-to-loguru log interception."""

import logging

import pytest
from loguru import logger

from storefront.api.utils.app_startup import InterceptHandler


@pytest.fixture
def captured():
    messages: list = []
    sink_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(sink_id)


def _record(name: str, level: int, msg: str) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, msg, None, None)


def test_forwards_stdlib_records(captured):
    InterceptHandler().emit(_record("pymongo.topology", logging.WARNING, "slow server"))

    assert len(captured) == 1
    assert captured[0].record["message"] == "slow server"
    assert captured[0].record["level"].name == "WARNING"
    assert captured[0].record["extra"]["logger_name"] == "pymongo.topology"


def test_drops_uvicorn_access_logs(captured):
    InterceptHandler().emit(_record("uvicorn.access", logging.INFO, "GET / 200"))

    assert captured == []


def test_drops_uvicorn_error_tracebacks(captured):
    InterceptHandler().emit(_record("uvicorn.error", logging.ERROR, "Exception in ASGI"))
    InterceptHandler().emit(_record("uvicorn.error", logging.INFO, "Started server"))

    assert [message.record["message"] for message in captured] == ["Started server"]
