"""Structured logging — JSON formatter output."""

import json
import logging

from techgear.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "techgear.test", logging.INFO, __file__, 1, "Product %s", ("deleted",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formats_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "techgear.test"
    assert log["message"] == "Product deleted"
    assert "timestamp" in log


def test_includes_known_extra_fields():
    log = json.loads(JSONFormatter().format(_record(product_id=5, rows=1)))
    assert log["product_id"] == 5
    assert log["rows"] == 1


def test_skips_unknown_and_empty_extras():
    log = json.loads(JSONFormatter().format(_record(secret="x", customer_id=None)))
    assert "secret" not in log
    assert "customer_id" not in log
