"""Structured Logging — JSONFormatter output shape and setup_logging wiring."""

import json
import logging
import sys

import pytest

from srpcalc.infrastructure.observability import JSONFormatter, setup_logging


def _record(msg="hello", **extra):
    record = logging.LogRecord(
        "srpcalc.test", logging.INFO, __file__, 1, msg, None, None,
    )
    for k, v in extra.items():
        setattr(record, k, v)
    return record


def test_json_formatter_base_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "INFO"
    assert out["logger"] == "srpcalc.test"
    assert out["message"] == "hello"
    assert "timestamp" in out


def test_json_formatter_surfaces_extras():
    out = json.loads(JSONFormatter().format(
        _record(
            operation="divide", path="r.txt", request_path="/api/v1/results",
            result=5, error_code=None,
        ),
    ))
    assert out["operation"] == "divide"
    assert out["path"] == "r.txt"
    assert out["request_path"] == "/api/v1/results"
    assert out["result"] == 5
    assert "error_code" not in out


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()
    out = json.loads(JSONFormatter().format(record))
    assert "ValueError: boom" in out["exception"]


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.parametrize("fmt, formatter_type", [
    ("json", JSONFormatter),
    ("text", logging.Formatter),
])
def test_setup_logging_installs_handler(restore_root_logger, fmt, formatter_type):
    handler = setup_logging("debug", fmt)
    assert handler in logging.getLogger().handlers
    assert isinstance(handler.formatter, formatter_type)
    assert logging.getLogger().level == logging.DEBUG
