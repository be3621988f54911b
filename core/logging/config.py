from __future__ import annotations

import logging
import os
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import Optional

from .formatter import ConsoleFormatter, JSONFormatter
from .levels import register_levels, to_level

_listener: QueueListener | None = None


def bootstrap_logging(
    *,
    service: str = "port-wait",
    level: str | int | None = None,
    console: bool = True,
    log_dir: Optional[Path] = None,
    log_file_name: str = "port_wait.jsonl",
    max_bytes: int = 2_000_000,
    backup_count: int = 3,
) -> None:
    """Configure the root logger once per process.

    Console output goes to stderr so stdout stays clean for results. When
    ``log_dir`` is given, records are also written as JSON lines through a
    queue listener so file I/O never happens on the polling thread.
    """
    global _listener
    shutdown_logging()
    register_levels()
    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    root.setLevel(lvl)

    if console:
        handler = logging.StreamHandler(sys.stderr)
        console_level_str = os.getenv("LOG_CONSOLE_LEVEL", "")
        handler.setLevel(to_level(console_level_str) if console_level_str else lvl)
        handler.setFormatter(ConsoleFormatter(color=sys.stderr.isatty()))
        root.addHandler(handler)

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        json_handler = RotatingFileHandler(
            str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count
        )
        json_handler.setLevel(lvl)
        json_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        root.addHandler(QueueHandler(q))
        _listener = QueueListener(q, json_handler, respect_handler_level=True)
        _listener.start()

    logging.getLogger(__name__).debug("logging configured for %s", service)


def shutdown_logging() -> None:
    global _listener
    if _listener is not None:
        _listener.stop()
        _listener = None
