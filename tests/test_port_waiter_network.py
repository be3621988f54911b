import time

import pytest

from application.services.port_wait import PortWaiter
from domain.entities.poll import PollRequest
from domain.exceptions import PortWaitTimeout


@pytest.fixture
def waiter():
    return PortWaiter()


def test_reachable_listener_is_available(waiter, listener):
    start = time.monotonic()

    result = waiter.poll(PollRequest(host="127.0.0.1", port=listener, timeout_sec=5))

    assert result.available is True
    assert result.identifier == f"127.0.0.1:{listener}"
    assert time.monotonic() - start < 2.0


def test_repeated_polls_are_stable(waiter, listener):
    request = PollRequest(host="127.0.0.1", port=listener, timeout_sec=5)

    results = [waiter.poll(request) for _ in range(5)]

    assert all(r.available for r in results)
    assert {r.identifier for r in results} == {f"127.0.0.1:{listener}"}


def test_listener_started_mid_poll(waiter, delayed_listener):
    port = delayed_listener(0.1)

    result = waiter.poll(PollRequest(host="127.0.0.1", port=port, timeout_sec=1))

    assert result.available is True


def test_closed_port_with_error_fails_near_deadline(waiter, closed_port):
    start = time.monotonic()

    with pytest.raises(PortWaitTimeout) as exc_info:
        waiter.poll(PollRequest(host="127.0.0.1", port=closed_port, timeout_sec=1, error_on_timeout=True))

    elapsed = time.monotonic() - start
    assert exc_info.value.summary == "connection timeout"
    assert f"127.0.0.1:{closed_port}" in exc_info.value.detail
    assert elapsed < 2.0


def test_closed_port_without_error_is_unavailable(waiter, closed_port):
    result = waiter.poll(PollRequest(host="127.0.0.1", port=closed_port, timeout_sec=1, cooldown_ms=10))

    assert result.available is False
    assert result.identifier == f"127.0.0.1:{closed_port}"


def test_cooldown_overshoot_fails_before_deadline(waiter, closed_port):
    start = time.monotonic()

    with pytest.raises(PortWaitTimeout) as exc_info:
        waiter.poll(
            PollRequest(host="127.0.0.1", port=closed_port, timeout_sec=1, cooldown_ms=2000, error_on_timeout=True)
        )

    assert exc_info.value.premature is True
    assert "cooldown skipped" in exc_info.value.detail
    assert time.monotonic() - start < 1.0


def test_huge_timeout_against_listener(waiter, listener):
    result = waiter.poll(PollRequest(host="127.0.0.1", port=listener, timeout_sec=10_000_000_000))

    assert result.available is True
