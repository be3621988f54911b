"""Domain interfaces."""
from .dialer import Connection, Dialer

__all__ = [
    'Connection',
    'Dialer',
]
