"""Structured logging tests: JSON formatter fields and setup_logging wiring."""

import json
import logging

from standin.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "standin.test", logging.INFO, __file__, 1, "served %s", ("/admin",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "standin.test"
    assert log["message"] == "served /admin"
    assert "timestamp" in log


def test_json_formatter_surfaces_request_extras():
    log = json.loads(JSONFormatter().format(
        _record(path="/admin", method="GET", page="admin_dashboard", status_code=200),
    ))
    assert log["path"] == "/admin"
    assert log["method"] == "GET"
    assert log["page"] == "admin_dashboard"
    assert log["status_code"] == 200
    assert "error_code" not in log


def test_setup_logging_installs_handler():
    previous = logging.root.level
    handler = setup_logging("debug", "json")
    try:
        assert handler in logging.root.handlers
        assert isinstance(handler.formatter, JSONFormatter)
        assert logging.root.level == logging.DEBUG
    finally:
        logging.root.removeHandler(handler)
        logging.root.setLevel(previous)


def test_setup_logging_text_format():
    previous = logging.root.level
    handler = setup_logging("WARNING", "text")
    try:
        assert not isinstance(handler.formatter, JSONFormatter)
        assert logging.root.level == logging.WARNING
    finally:
        logging.root.removeHandler(handler)
        logging.root.setLevel(previous)
