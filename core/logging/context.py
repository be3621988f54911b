from __future__ import annotations

import contextvars
from typing import Any, Dict

_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("poll_context", default={})


def get_context() -> Dict[str, Any]:
    return dict(_context.get())


class context(object):
    """Bind values for the duration of a ``with`` block, e.g. the polled address."""

    def __init__(self, **values: Any) -> None:
        self._values = values
        self._token = None

    def __enter__(self) -> Dict[str, Any]:
        current = dict(_context.get())
        current.update({k: v for k, v in self._values.items() if v is not None})
        self._token = _context.set(current)
        return current

    def __exit__(self, exc_type, exc, tb):
        if self._token is not None:
            _context.reset(self._token)
            self._token = None
        return False
