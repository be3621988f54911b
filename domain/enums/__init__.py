"""Domain enumerations."""
from .poll_state import PollState

__all__ = [
    'PollState',
]
