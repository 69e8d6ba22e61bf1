"""HTTP/1.1 request-line parsing plus a TCP line listener and a UDP line sender."""

__version__ = "0.1.0"
__all__ = ["request", "tcplistener", "udpsender"]