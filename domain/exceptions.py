"""Domain exceptions raised by the port waiter."""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .entities.poll import PollOutcome


class PortWaitError(Exception):
    pass


class InvalidPollRequest(PortWaitError, ValueError):
    """A request field is missing or out of range."""

    def __init__(self, attribute: str, message: str) -> None:
        super().__init__(f"{attribute}: {message}")
        self.attribute = attribute
        self.message = message


class PortWaitTimeout(PortWaitError):
    """The deadline ran out and the request asked for that to be an error."""

    def __init__(
        self,
        summary: str,
        detail: str,
        *,
        address: str,
        premature: bool = False,
        outcome: Optional["PollOutcome"] = None,
    ) -> None:
        super().__init__(f"{summary}: {detail}")
        self.summary = summary
        self.detail = detail
        self.address = address
        self.premature = premature
        self.outcome = outcome
