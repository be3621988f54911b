"""Dial primitive consumed by the port waiter."""
from typing import Optional, Protocol


class Connection(Protocol):
    def close(self) -> None: ...


class Dialer(Protocol):
    """Opens a TCP connection.

    ``timeout=None`` blocks until the OS gives up; otherwise the attempt is
    bounded by ``timeout`` seconds. Failures raise ``OSError``.
    """

    def dial(self, host: str, port: int, timeout: Optional[float]) -> Optional[Connection]: ...
