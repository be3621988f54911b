from __future__ import annotations

import logging
from enum import IntEnum


class LogLevel(IntEnum):
    TRACE = 5
    DEBUG = 10
    INFO = 20
    SUCCESS = 25
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


_ALIASES = {
    "WARN": LogLevel.WARNING,
    "FATAL": LogLevel.CRITICAL,
}


def register_levels() -> None:
    for lvl in (LogLevel.TRACE, LogLevel.SUCCESS):
        if logging.getLevelName(int(lvl)) == f"Level {int(lvl)}":
            logging.addLevelName(int(lvl), lvl.name)


def to_level(value: int | str | None) -> int:
    if value is None:
        return logging.INFO
    if isinstance(value, int):
        return value
    name = value.strip().upper()
    if name in _ALIASES:
        return int(_ALIASES[name])
    try:
        return int(LogLevel[name])
    except KeyError:
        return logging.INFO
