from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict

from .context import get_context

_LEVEL_COLORS = {
    "TRACE": "\033[90m",
    "DEBUG": "\033[37m",
    "INFO": "\033[36m",
    "SUCCESS": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
_RESET = "\033[0m"

# Poll fields promoted out of ``extra`` into their own columns.
_POLL_FIELDS = ("address", "attempt", "state", "elapsed_ms")


def _record_metadata(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        "timestamp": time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime(record.created)),
        "level": record.levelname,
        "service": getattr(record, "service", None),
        "module": record.module,
        "function": record.funcName,
        "line_number": record.lineno,
        "thread_id": record.thread,
        "process_id": record.process,
    }


def _poll_fields(record: logging.LogRecord, ctx: Dict[str, Any]) -> Dict[str, Any]:
    fields: Dict[str, Any] = {}
    for name in _POLL_FIELDS:
        value = getattr(record, name, None)
        if value is None:
            value = ctx.get(name)
        if value is not None:
            fields[name] = value
    return fields


class ConsoleFormatter(logging.Formatter):
    def __init__(self, *, color: bool = True) -> None:
        super().__init__()
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        try:
            md = _record_metadata(record)
            ctx = get_context()
            lvl = record.levelname
            parts = [
                md["timestamp"],
                lvl,
                md["service"] or "-",
                f"{md['module']}:{md['function']}:{md['line_number']}",
                record.getMessage(),
            ]
            fields = _poll_fields(record, ctx)
            if fields:
                parts.append(" ".join(f"{k}={v}" for k, v in fields.items()))
            rest = {k: v for k, v in ctx.items() if k not in fields}
            if rest:
                parts.append(f"{rest}")
            if record.exc_info:
                parts.append(self.formatException(record.exc_info))
            line = " | ".join(parts)
            if not self.color:
                return line
            return f"{_LEVEL_COLORS.get(lvl, '')}{line}{_RESET}"
        except Exception:
            try:
                return record.getMessage()
            except Exception:
                return "<log format error>"


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        try:
            payload: Dict[str, Any] = _record_metadata(record)
            payload["message"] = record.getMessage()
            ctx = get_context()
            payload.update(_poll_fields(record, ctx))
            if ctx:
                payload["context"] = ctx
            error = getattr(record, "error", None)
            if error is not None:
                payload["error"] = error
            if record.exc_info:
                try:
                    payload["exception"] = self.formatException(record.exc_info)
                except Exception:
                    payload["exception"] = "unavailable"
            return json.dumps(payload, default=str, separators=(",", ":"))
        except Exception:
            return json.dumps({"message": "log format error"}, separators=(",", ":"))
