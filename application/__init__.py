"""Application layer - Services and use cases."""
from .services import PollConfig, PortWaiter
from .use_cases import PORT_WAIT_SCHEMA, WaitForPortUseCase

__all__ = [
    'PollConfig',
    'PortWaiter',
    'PORT_WAIT_SCHEMA',
    'WaitForPortUseCase',
]
