import json
import logging

from beerstock.core.logging import JsonFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.makeLogRecord(
        {"name": "beerstock.stock", "levelname": "WARNING", "levelno": logging.WARNING, "msg": "Stock decrement rejected"}
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_flattens_extra_fields():
    line = JsonFormatter(service="beerstock-test").format(_record(beer_id=7, quantity=4))
    payload = json.loads(line)

    assert payload["service"] == "beerstock-test"
    assert payload["logger"] == "beerstock.stock"
    assert payload["level"] == "WARNING"
    assert payload["message"] == "Stock decrement rejected"
    assert payload["beer_id"] == 7
    assert payload["quantity"] == 4


def test_json_formatter_does_not_override_core_fields():
    payload = json.loads(JsonFormatter().format(_record(level="spoofed")))
    assert payload["level"] == "WARNING"
