"""Diagnostics handed back to the host alongside a result."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Optional


class Severity(Enum):
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Diagnostic:
    severity: Severity
    summary: str
    detail: str = ""
    attribute: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            'severity': self.severity.value,
            'summary': self.summary,
            'detail': self.detail,
        }
        if self.attribute:
            data['attribute'] = self.attribute
        return data

    def __str__(self) -> str:
        where = f" [{self.attribute}]" if self.attribute else ""
        if self.detail:
            return f"{self.severity.value}{where}: {self.summary}: {self.detail}"
        return f"{self.severity.value}{where}: {self.summary}"


class Diagnostics:
    """Ordered collection of diagnostics."""

    def __init__(self, items: Optional[Iterable[Diagnostic]] = None) -> None:
        self._items: List[Diagnostic] = list(items or [])

    def add_error(self, summary: str, detail: str = "", *, attribute: Optional[str] = None) -> None:
        self._items.append(Diagnostic(Severity.ERROR, summary, detail, attribute))

    def add_warning(self, summary: str, detail: str = "", *, attribute: Optional[str] = None) -> None:
        self._items.append(Diagnostic(Severity.WARNING, summary, detail, attribute))

    def has_error(self) -> bool:
        return any(d.severity is Severity.ERROR for d in self._items)

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self._items if d.severity is Severity.ERROR]

    def to_list(self) -> List[Dict[str, Any]]:
        return [d.to_dict() for d in self._items]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Diagnostics({self._items!r})"
