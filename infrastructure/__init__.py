"""Infrastructure layer - network primitives."""
from .network import TCPDialer

__all__ = [
    'TCPDialer',
]
