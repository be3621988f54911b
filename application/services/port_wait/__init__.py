from .poll_config import PollConfig
from .port_waiter import DEFAULT_COOLDOWN_MS, MAX_ATTEMPT_TIMEOUT_SEC, TIMEOUT_SUMMARY, PortWaiter

__all__ = [
    "PollConfig",
    "PortWaiter",
    "DEFAULT_COOLDOWN_MS",
    "MAX_ATTEMPT_TIMEOUT_SEC",
    "TIMEOUT_SUMMARY",
]
