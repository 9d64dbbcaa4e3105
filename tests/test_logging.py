"""
構造化ログのテスト
"""

import io
import json
import logging

from jackut.core.exceptions import UnknownAccountError
from jackut.core.logging import (
    StructuredFormatter,
    get_logger,
    log_business_event,
    log_error,
)


def capture(name: str) -> tuple[logging.Logger, io.StringIO]:
    """StructuredFormatter で文字列に書き出すロガー"""
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    logger = logging.getLogger(f"jackut.tests.{name}")
    logger.handlers = [handler]
    logger.propagate = False
    logger.setLevel(logging.INFO)
    return logger, stream


def entries(stream: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in stream.getvalue().splitlines()]


class TestStructuredFormatter:
    """StructuredFormatter のテスト"""

    def test_business_event(self):
        """event_type と account_id はトップレベル、それ以外は extra"""
        logger, stream = capture("business")

        log_business_event(logger, "crush_declared", account_id="alice",
                           target="bob", mutual=False, community=None)

        [entry] = entries(stream)
        assert entry["level"] == "INFO"
        assert entry["event_type"] == "business_event"
        assert entry["account_id"] == "alice"
        assert entry["extra"] == {
            "business_event": "crush_declared",
            "target": "bob",
            "mutual": False,
        }

    def test_error_includes_error_code(self):
        logger, stream = capture("error")

        log_error(logger, UnknownAccountError("zoe"), {"operation": "lookup"})

        [entry] = entries(stream)
        assert entry["level"] == "ERROR"
        assert entry["event_type"] == "error"
        assert entry["extra"] == {"operation": "lookup"}
        assert entry["exception"]["type"] == "UnknownAccountError"
        assert entry["exception"]["error_code"] == "UnknownAccountError"
        assert entry["exception"]["details"] == {"account_id": "zoe"}

    def test_plain_message_has_no_extra(self):
        logger, stream = capture("plain")
        logger.info("hello %s", "mundo")

        [entry] = entries(stream)
        assert entry["message"] == "hello mundo"
        assert "extra" not in entry
        assert "exception" not in entry


class TestGetLogger:
    def test_names_are_under_jackut(self):
        assert get_logger("api.main").name == "jackut.api.main"
        assert get_logger("jackut.adapters").name == "jackut.adapters"
