"""Application services root exports."""
from .port_wait import PollConfig, PortWaiter

__all__ = [
    "PollConfig",
    "PortWaiter",
]
