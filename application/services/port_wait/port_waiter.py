from __future__ import annotations

import time
from typing import Callable, Optional

from core.logging.context import context as log_context
from core.logging.logger import StructuredLogger, get_logger
from domain.entities.poll import PollOutcome, PollRequest, PollResult
from domain.enums.poll_state import PollState
from domain.exceptions import PortWaitTimeout
from domain.interfaces.dialer import Connection, Dialer
from infrastructure.network.tcp_dialer import TCPDialer

DEFAULT_COOLDOWN_MS = 500
TIMEOUT_SUMMARY = "connection timeout"
# Upper bound for a single dial; socket timeouts overflow near 9.2e9 seconds.
MAX_ATTEMPT_TIMEOUT_SEC = 86400.0 * 365

Clock = Callable[[], float]
Sleep = Callable[[float], None]


class PortWaiter:
    """Polls a TCP address until it accepts a connection or the deadline passes.

    A poll is synchronous. Each iteration makes one dial attempt; failed
    attempts are followed by a fixed cooldown. The deadline is tracked on a
    monotonic clock. With ``timeout_sec == 0`` there is no deadline and the
    only way out is a successful connection.
    """

    def __init__(
        self,
        dialer: Optional[Dialer] = None,
        *,
        default_cooldown_ms: int = DEFAULT_COOLDOWN_MS,
        logger: Optional[StructuredLogger] = None,
        clock: Clock = time.monotonic,
        sleep: Sleep = time.sleep,
    ) -> None:
        if default_cooldown_ms < 0:
            raise ValueError("default_cooldown_ms must be >= 0")
        self.dialer = dialer or TCPDialer()
        self.default_cooldown_ms = default_cooldown_ms
        self.logger = logger or get_logger(__name__, service="port-wait")
        self._clock = clock
        self._sleep = sleep

    def poll(self, request: PollRequest) -> PollResult:
        """Run one poll.

        Returns a result with ``available`` set, or raises ``PortWaitTimeout``
        when the deadline runs out and ``request.error_on_timeout`` is set.
        """
        address = request.address
        start = self._clock()
        deadline = start + request.timeout_sec if request.has_deadline else None
        cooldown_ms = request.cooldown_or(self.default_cooldown_ms)
        attempts = 0

        with log_context(address=address):
            self.logger.info(
                lambda: "poll-start",
                extra={"timeout_sec": request.timeout_sec, "cooldown_ms": cooldown_ms},
            )
            while True:
                if deadline is None:
                    attempt_timeout = None
                else:
                    remaining = deadline - self._clock()
                    if remaining <= 0:
                        return self._timed_out(request, address, start, attempts, premature=False)
                    attempt_timeout = min(remaining, MAX_ATTEMPT_TIMEOUT_SEC)

                attempts += 1
                conn = self._attempt(request, attempt_timeout, attempts)
                if conn is not None:
                    self._close(conn)
                    outcome = self._outcome(PollState.SUCCEEDED, start, attempts)
                    self.logger.success(
                        lambda: "port-available",
                        extra={"attempt": attempts, "state": outcome.state.value, "elapsed_ms": outcome.elapsed_ms},
                    )
                    return PollResult(identifier=address, available=True, outcome=outcome)

                if cooldown_ms == 0:
                    continue
                cooldown_s = cooldown_ms / 1000.0
                if deadline is not None and self._clock() + cooldown_s > deadline:
                    # sleeping would overshoot the deadline
                    return self._timed_out(request, address, start, attempts, premature=True)
                self.logger.trace(
                    lambda: f"cooldown {cooldown_ms}ms",
                    extra={"attempt": attempts, "state": PollState.COOLING_DOWN.value},
                )
                self._sleep(cooldown_s)

    def _attempt(self, request: PollRequest, timeout: Optional[float], attempt: int) -> Optional[Connection]:
        try:
            conn = self.dialer.dial(request.host, request.port, timeout)
        except (OSError, ValueError) as e:
            self.logger.debug(
                lambda: "attempt-failed",
                extra={"attempt": attempt, "state": PollState.ATTEMPTING.value, "error": str(e) or type(e).__name__},
            )
            return None
        if conn is None:
            self.logger.debug(
                lambda: "attempt-failed",
                extra={"attempt": attempt, "state": PollState.ATTEMPTING.value, "error": "no connection"},
            )
        return conn

    def _close(self, conn: Connection) -> None:
        try:
            conn.close()
        except OSError as e:
            self.logger.debug(lambda: f"close-failed {e}")

    def _timed_out(
        self,
        request: PollRequest,
        address: str,
        start: float,
        attempts: int,
        *,
        premature: bool,
    ) -> PollResult:
        if request.error_on_timeout:
            outcome = self._outcome(PollState.TIMED_OUT_ERROR, start, attempts)
            if premature:
                detail = f"prematurely timed out trying to connect to {address} (cooldown skipped)"
            else:
                detail = f"timed out trying to connect to {address}"
            self.logger.error(
                lambda: f"poll-timeout {detail}",
                extra={"attempt": attempts, "state": outcome.state.value, "elapsed_ms": outcome.elapsed_ms},
            )
            raise PortWaitTimeout(
                TIMEOUT_SUMMARY, detail, address=address, premature=premature, outcome=outcome
            )

        outcome = self._outcome(PollState.TIMED_OUT_UNAVAILABLE, start, attempts)
        self.logger.warning(
            lambda: "poll-timeout unavailable" + (" (cooldown skipped)" if premature else ""),
            extra={"attempt": attempts, "state": outcome.state.value, "elapsed_ms": outcome.elapsed_ms},
        )
        return PollResult(identifier=address, available=False, outcome=outcome)

    def _outcome(self, state: PollState, start: float, attempts: int) -> PollOutcome:
        elapsed_ms = int((self._clock() - start) * 1000.0)
        return PollOutcome(state=state, attempts=attempts, elapsed_ms=max(0, elapsed_ms))
