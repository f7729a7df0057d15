"""Tests for JSON log formatting."""

from __future__ import annotations

import json
import logging
import sys

from mediaingester.core.logger_setup import JsonFormatter, configure_logging


def _record(msg: str = "hello %s", args=("world",), **extra) -> logging.LogRecord:
    record = logging.LogRecord("mediaingester.test", logging.INFO, __file__, 1, msg, args, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:
    def test_core_fields(self):
        payload = json.loads(JsonFormatter().format(_record()))
        assert payload["message"] == "hello world"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "mediaingester.test"
        assert "timestamp" in payload

    def test_extra_fields_included(self):
        payload = json.loads(JsonFormatter().format(_record(job_id="job-1", object="b::/k")))
        assert payload["job_id"] == "job-1"
        assert payload["object"] == "b::/k"

    def test_exception_rendered(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())
        payload = json.loads(JsonFormatter().format(record))
        assert "ValueError: boom" in payload["exception"]


class TestConfigureLogging:
    def test_installs_formatter_on_root_handlers(self):
        root = logging.getLogger()
        handler = logging.StreamHandler()
        root.addHandler(handler)
        level = root.level
        try:
            configure_logging("debug")
            assert isinstance(handler.formatter, JsonFormatter)
            assert root.level == logging.DEBUG
        finally:
            root.removeHandler(handler)
            root.setLevel(level)
