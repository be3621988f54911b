"""TCP dialer backed by the socket module."""
import socket
from typing import Optional


class TCPDialer:
    """Default dialer: ``socket.create_connection`` with an optional bound."""

    def __init__(self, source_address: Optional[tuple] = None) -> None:
        self.source_address = source_address

    def dial(self, host: str, port: int, timeout: Optional[float]) -> socket.socket:
        # An explicit None disables the socket timeout for this attempt.
        return socket.create_connection(
            (host, port),
            timeout=timeout,
            source_address=self.source_address,
        )
