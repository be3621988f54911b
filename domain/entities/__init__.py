"""Domain entities."""
from .poll import PollRequest, PollResult, PollOutcome, join_host_port
from .diagnostics import Diagnostic, Diagnostics, Severity

__all__ = [
    'PollRequest',
    'PollResult',
    'PollOutcome',
    'join_host_port',
    'Diagnostic',
    'Diagnostics',
    'Severity',
]
