"""Structured logging for the collector host and CLI."""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

import orjson

LOG_LEVEL_ENV = "DCOL_LOG_LEVEL"
LOG_FORMAT_ENV = "DCOL_LOG_FORMAT"

# Third-party loggers that are too chatty at INFO.
_QUIET_LOGGERS = ("asyncio", "urllib3", "httpx")


class JsonFormatter(logging.Formatter):
    """One JSON object per record; extras named ``ctx_*`` become top-level keys."""

    def format(self, record: logging.LogRecord) -> str:  # pragma: no cover - thin wrapper
        stamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: dict[str, Any] = {
            "ts": stamp.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname.lower(),
            "logger": record.name,
            "msg": record.getMessage(),
        }
        payload.update({key: value for key, value in vars(record).items() if key.startswith("ctx_")})
        if record.exc_info:
            payload["error"] = self.formatException(record.exc_info)
        return orjson.dumps(payload, default=str).decode("utf-8")


def configure_logging(level: str | int | None = None, fmt: str | None = None) -> None:
    """Install a single stdout handler on the root logger.

    ``fmt`` is ``"json"`` (default) or ``"plain"``; both arguments fall back
    to ``DCOL_LOG_LEVEL`` and ``DCOL_LOG_FORMAT``.
    """
    level = level or os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    fmt = (fmt or os.environ.get(LOG_FORMAT_ENV, "json")).lower()

    handler = logging.StreamHandler(sys.stdout)
    if fmt == "plain":
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)-7s %(name)s: %(message)s"))
    else:
        handler.setFormatter(JsonFormatter())

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = [handler]
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str = "design_collector") -> logging.Logger:
    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name)


__all__ = ["JsonFormatter", "configure_logging", "get_logger"]
