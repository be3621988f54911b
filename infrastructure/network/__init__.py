from .tcp_dialer import TCPDialer

__all__ = ['TCPDialer']
