import socket
import threading
import time

import pytest

from application.services.port_wait import PortWaiter


class FakeClock:
    """Manual monotonic clock; ``sleep`` advances it instead of blocking."""

    def __init__(self, start=0.0):
        self.now = start
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


class FakeConnection:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


class FakeDialer:
    """Scripted dialer.

    ``outcomes`` is consumed one entry per attempt; the last entry repeats.
    An entry is an exception to raise, ``None`` to return no connection, or
    ``"ok"`` to return a ``FakeConnection``. ``cost`` seconds are added to the
    clock on every attempt, capped by the attempt timeout.
    """

    def __init__(self, clock, outcomes, cost=0.0):
        self.clock = clock
        self.outcomes = list(outcomes)
        self.cost = cost
        self.calls = []
        self.connections = []

    def dial(self, host, port, timeout):
        self.calls.append((host, port, timeout))
        idx = min(len(self.calls), len(self.outcomes)) - 1
        outcome = self.outcomes[idx]
        spent = self.cost if timeout is None else min(self.cost, timeout)
        self.clock.now += spent
        if isinstance(outcome, BaseException):
            raise outcome
        if outcome is None:
            return None
        conn = FakeConnection()
        self.connections.append(conn)
        return conn


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_waiter(clock):
    def _make(outcomes, *, cost=0.0, default_cooldown_ms=500):
        dialer = FakeDialer(clock, outcomes, cost=cost)
        waiter = PortWaiter(
            dialer,
            default_cooldown_ms=default_cooldown_ms,
            clock=clock,
            sleep=clock.sleep,
        )
        return waiter, dialer
    return _make


def _free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


@pytest.fixture
def listener():
    """A local port that accepts connections (kernel backlog, no accept loop)."""
    srv = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    srv.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    srv.bind(("127.0.0.1", 0))
    srv.listen(16)
    try:
        yield srv.getsockname()[1]
    finally:
        srv.close()


@pytest.fixture
def closed_port():
    """A local port nothing listens on."""
    return _free_port()


@pytest.fixture
def delayed_listener():
    """Returns ``start(delay)`` which begins listening on a port after ``delay`` seconds."""
    port = _free_port()
    srv = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    srv.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    ready = threading.Event()

    def _serve(delay):
        time.sleep(delay)
        srv.bind(("127.0.0.1", port))
        srv.listen(16)
        ready.set()

    threads = []

    def start(delay):
        t = threading.Thread(target=_serve, args=(delay,), daemon=True)
        t.start()
        threads.append(t)
        return port

    try:
        yield start
    finally:
        for t in threads:
            t.join(timeout=5)
        srv.close()
