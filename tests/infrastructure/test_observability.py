"""Structured Logging: JSON formatter output."""

import json
import logging
import sys

from gateway.infrastructure.observability import JSONFormatter


def _record(**extra):
    record = logging.LogRecord(
        "gateway.test", logging.INFO, __file__, 1, "payment %s", ("sent",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "gateway.test"
    assert log["message"] == "payment sent"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(error_code="invalid_memo", account_id="GABC", seed="SSECRET"),
    ))
    assert log["error_code"] == "invalid_memo"
    assert log["account_id"] == "GABC"
    assert "seed" not in log


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = _record()
        record.exc_info = sys.exc_info()
    log = json.loads(JSONFormatter().format(record))
    assert "RuntimeError: boom" in log["exception"]
