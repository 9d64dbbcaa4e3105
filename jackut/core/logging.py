"""
構造化ログ
1行1 JSON オブジェクトで jackut ロガー配下のログを出力する

event_type と account_id はトップレベルに、それ以外の extra は
"extra" オブジェクトにまとめる。
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import IO, Any, Optional

from .exceptions import JackutException

ROOT_LOGGER = "jackut"

# トップレベルに出すフィールド
_PROMOTED_FIELDS = ("event_type", "account_id")

# LogRecord 自身の属性（extra として扱わない）
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class StructuredFormatter(logging.Formatter):
    """JSON 1行形式のフォーマッター"""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra = {
            key: value for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS
        }
        for key in _PROMOTED_FIELDS:
            if key in extra:
                entry[key] = extra.pop(key)
        if extra:
            entry["extra"] = extra

        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self._describe(record.exc_info[1])

        return json.dumps(entry, ensure_ascii=False, separators=(",", ":"), default=str)

    @staticmethod
    def _describe(error: BaseException) -> dict[str, Any]:
        described: dict[str, Any] = {
            "type": type(error).__name__,
            "message": str(error),
        }
        if isinstance(error, JackutException):
            described["error_code"] = error.error_code
            described["details"] = error.details
        return described


class JackutLogger:
    """jackut ロガーの初期化"""

    _handler: Optional[logging.Handler] = None

    @classmethod
    def configure(cls, log_level: str = "INFO", stream: Optional[IO[str]] = None) -> None:
        """
        ハンドラーを1つだけ登録してレベルを設定

        2回目以降の呼び出しはレベルのみ更新する。
        """
        root_logger = logging.getLogger(ROOT_LOGGER)
        root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

        if cls._handler is None:
            cls._handler = logging.StreamHandler(stream or sys.stdout)
            cls._handler.setFormatter(StructuredFormatter())
            root_logger.addHandler(cls._handler)

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        if cls._handler is None:
            cls.configure()
        if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
            name = f"{ROOT_LOGGER}.{name}"
        return logging.getLogger(name)


def get_logger(name: str) -> logging.Logger:
    """jackut 配下のロガーを取得"""
    return JackutLogger.get_logger(name)


def log_request(logger: logging.Logger, endpoint: str, method: str = "POST", **kwargs):
    logger.info(f"{method} {endpoint}", extra={
        "event_type": "request",
        "endpoint": endpoint,
        "method": method,
        **kwargs,
    })


def log_response(logger: logging.Logger, endpoint: str, status_code: int,
                 duration_ms: float, **kwargs):
    logger.info(f"{status_code} {endpoint} ({duration_ms}ms)", extra={
        "event_type": "response",
        "endpoint": endpoint,
        "status_code": status_code,
        "duration_ms": duration_ms,
        **kwargs,
    })


def log_error(logger: logging.Logger, error: Exception, context: Optional[dict[str, Any]] = None):
    """例外をスタック情報付きで記録"""
    logger.error(f"Error occurred: {error}", exc_info=error, extra={
        "event_type": "error",
        **(context or {}),
    })


def log_business_event(logger: logging.Logger, event: str, account_id: Optional[str] = None,
                       **kwargs):
    """
    ドメイン上の変更を記録

    値が None のフィールドは出力しない。
    """
    extra: dict[str, Any] = {"event_type": "business_event", "business_event": event}
    if account_id:
        extra["account_id"] = account_id
    extra.update({key: value for key, value in kwargs.items() if value is not None})
    logger.info(f"Business event: {event}", extra=extra)
