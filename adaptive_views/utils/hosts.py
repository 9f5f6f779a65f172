"""
Host helpers for adaptive-views

Extracts the addressed hostname from a request without normalizing it.
"""
from starlette.requests import Request


def strip_port(host: str) -> str:
    """Remove a port suffix from a host string.

    Handles IPv6 bracket notation (``[::1]:8080``). Case is preserved.
    """
    if host.startswith("["):
        bracket_end = host.find("]")
        if bracket_end >= 0:
            return host[1:bracket_end]
        return host.strip("[]")

    colon = host.rfind(":")
    if colon >= 0:
        port = host[colon + 1:]
        if port == "" or port.isdigit():
            return host[:colon]

    return host


def request_host(request: Request) -> str:
    """Hostname the client addressed, or an empty string if none was sent."""
    return strip_port(request.headers.get("host", ""))
