"""Presentation layer - User interfaces."""
from .cli import PortWaitCommand

__all__ = [
    "PortWaitCommand",
]
