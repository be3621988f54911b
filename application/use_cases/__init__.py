"""Application use cases."""
from .wait_for_port import PORT_WAIT_SCHEMA, WaitForPortUseCase

__all__ = [
    'PORT_WAIT_SCHEMA',
    'WaitForPortUseCase',
]
