"""Domain layer - poll entities, states, exceptions and the dial interface."""
from .entities import (
    PollRequest, PollResult, PollOutcome, join_host_port,
    Diagnostic, Diagnostics, Severity,
)
from .enums import PollState
from .exceptions import PortWaitError, InvalidPollRequest, PortWaitTimeout
from .interfaces import Connection, Dialer

__all__ = [
    # Entities
    'PollRequest',
    'PollResult',
    'PollOutcome',
    'join_host_port',
    'Diagnostic',
    'Diagnostics',
    'Severity',
    # Enums
    'PollState',
    # Exceptions
    'PortWaitError',
    'InvalidPollRequest',
    'PortWaitTimeout',
    # Interfaces
    'Connection',
    'Dialer',
]
