"""Presentation CLI exports."""
from .port_wait_command import PortWaitCommand, build_parser

__all__ = [
    "PortWaitCommand",
    "build_parser",
]
