"""Poll request/result entities."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..enums.poll_state import PollState
from ..exceptions import InvalidPollRequest

MAX_PORT = 65535


def join_host_port(host: str, port: int) -> str:
    """Combine host and port into ``host:port``, bracketing IPv6 literals."""
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def _require_int(attribute: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidPollRequest(attribute, f"expected an integer, got {value!r}")
    return value


@dataclass(frozen=True)
class PollRequest:
    """Immutable input for one poll.

    ``cooldown_ms=None`` means the caller did not set it and the waiter's
    default applies; an explicit ``0`` disables pacing.
    """

    host: str
    port: int
    timeout_sec: int = 0
    cooldown_ms: Optional[int] = None
    error_on_timeout: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.host, str) or not self.host.strip():
            raise InvalidPollRequest("host", "must be a non-empty string")
        if self.host.startswith("[") and self.host.endswith("]"):
            # dial and join_host_port both expect the bare IPv6 literal
            object.__setattr__(self, "host", self.host[1:-1])
        if not self.host or "[" in self.host or "]" in self.host:
            raise InvalidPollRequest("host", f"malformed host {self.host!r}")
        port = _require_int("port", self.port)
        if not 1 <= port <= MAX_PORT:
            raise InvalidPollRequest("port", f"must be between 1 and {MAX_PORT}, got {port}")
        if _require_int("timeout_sec", self.timeout_sec) < 0:
            raise InvalidPollRequest("timeout_sec", "must be >= 0")
        if self.cooldown_ms is not None and _require_int("cooldown_ms", self.cooldown_ms) < 0:
            raise InvalidPollRequest("cooldown_ms", "must be >= 0")
        if not isinstance(self.error_on_timeout, bool):
            raise InvalidPollRequest("error_on_timeout", "must be a boolean")

    @property
    def address(self) -> str:
        return join_host_port(self.host, self.port)

    @property
    def has_deadline(self) -> bool:
        return self.timeout_sec > 0

    def cooldown_or(self, default_ms: int) -> int:
        """Cooldown in milliseconds, falling back to ``default_ms`` when unset."""
        return default_ms if self.cooldown_ms is None else self.cooldown_ms


@dataclass(frozen=True)
class PollOutcome:
    """How a poll ended: final state, number of dial attempts, wall time."""

    state: PollState
    attempts: int
    elapsed_ms: int


@dataclass(frozen=True)
class PollResult:
    identifier: str
    available: bool
    outcome: Optional[PollOutcome] = None
