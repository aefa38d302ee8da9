# tests/unit/logging/test_logger.py - v3
"""Tests for logging/logger.py - logger factory and formatters."""

from __future__ import annotations

import json
import logging
import sys
from logging.handlers import RotatingFileHandler

import pytest

from filecache.logging.context import clear_context, set_operation_context
from filecache.logging.logger import (
    JsonFormatter,
    TextFormatter,
    get_logger,
    parse_size,
    setup_logging,
)


def _record(msg: str, level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="test", level=level, pathname="", lineno=0,
        msg=msg, args=(), exc_info=None,
    )


class TestJsonFormatter:
    def setup_method(self):
        clear_context()

    def teardown_method(self):
        clear_context()

    def test_format_basic(self):
        parsed = json.loads(JsonFormatter().format(_record("Hello")))
        assert parsed["level"] == "INFO"
        assert parsed["message"] == "Hello"
        assert "timestamp" in parsed
        assert "context" not in parsed

    def test_format_with_context(self):
        set_operation_context("save", "todo.json")
        parsed = json.loads(JsonFormatter().format(_record("saved")))
        assert parsed["context"] == {"operation": "save", "cache_file": "todo.json"}

    def test_format_with_exception(self):
        try:
            raise OSError("disk full")
        except OSError:
            record = _record("boom", logging.ERROR)
            record.exc_info = sys.exc_info()
        parsed = json.loads(JsonFormatter().format(record))
        assert "disk full" in parsed["exception"]


class TestTextFormatter:
    def teardown_method(self):
        clear_context()

    def test_format_basic(self):
        output = TextFormatter().format(_record("Hello text"))
        assert "Hello text" in output
        assert "INFO" in output

    def test_format_with_context(self):
        set_operation_context("load", "default.json")
        output = TextFormatter().format(_record("Loaded"))
        assert "[load]" in output
        assert "(default.json)" in output


class TestGetLogger:
    def test_returns_namespaced_logger(self):
        assert get_logger("test_module").name == "filecache.test_module"

    def test_keeps_already_namespaced(self):
        assert get_logger("filecache.cache.persistence").name == "filecache.cache.persistence"


class TestSetupLogging:
    def test_setup_json(self):
        setup_logging(level="DEBUG", log_format="json")
        root = logging.getLogger("filecache")
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_setup_text(self):
        setup_logging(level="INFO", log_format="text")
        root = logging.getLogger("filecache")
        assert root.level == logging.INFO
        assert isinstance(root.handlers[0].formatter, TextFormatter)

    def test_reinit_does_not_stack_handlers(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger("filecache").handlers) == 1

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "filecache.log"
        setup_logging(log_format="json", log_file=log_file)
        get_logger("test").info("to file")
        for handler in logging.getLogger("filecache").handlers:
            handler.flush()
        line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
        assert json.loads(line)["message"] == "to file"

    def test_log_file_rotation_settings(self, tmp_path):
        log_file = tmp_path / "deep" / "dir" / "filecache.log"
        setup_logging(log_file=str(log_file), rotation="1MB", retention=5)
        file_handlers = [
            h for h in logging.getLogger("filecache").handlers
            if isinstance(h, RotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        assert file_handlers[0].maxBytes == 1024 * 1024
        assert file_handlers[0].backupCount == 5
        assert log_file.parent.is_dir()

    def test_bad_rotation_size(self, tmp_path):
        with pytest.raises(ValueError, match="Invalid size"):
            setup_logging(log_file=tmp_path / "x.log", rotation="10bytes")


class TestParseSize:
    @pytest.mark.parametrize("text,expected", [
        ("512B", 512),
        ("512KB", 512 * 1024),
        ("10MB", 10 * 1024 * 1024),
        ("1GB", 1024 * 1024 * 1024),
        ("10mb", 10 * 1024 * 1024),
        (" 2 MB ", 2 * 1024 * 1024),
    ])
    def test_valid(self, text, expected):
        assert parse_size(text) == expected

    @pytest.mark.parametrize("text", ["10bytes", "", "MB", "-1MB"])
    def test_invalid(self, text):
        with pytest.raises(ValueError, match="Invalid size"):
            parse_size(text)
