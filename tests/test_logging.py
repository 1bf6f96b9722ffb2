import json
import logging

from src.time_tracking.time_tracking.core.logging import JsonFormatter, configure_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("time_tracking.test", logging.INFO, __file__, 1, "checked %s", ("in",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_emits_core_fields():
    payload = json.loads(JsonFormatter().format(_record()))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "time_tracking.test"
    assert payload["message"] == "checked in"
    assert "timestamp" in payload


def test_json_formatter_carries_known_extras_only():
    payload = json.loads(JsonFormatter().format(_record(employee_id=3, status_code=201, secret="x")))

    assert payload["employee_id"] == 3
    assert payload["status_code"] == 201
    assert "secret" not in payload


def test_configure_logging_sets_level_and_formatter():
    configure_logging("DEBUG", json_output=True)
    root = logging.getLogger()

    assert root.level == logging.DEBUG
    assert isinstance(root.handlers[0].formatter, JsonFormatter)
    configure_logging("INFO")
