from __future__ import annotations


class MemoClientError(Exception):
    """Base class for client-side failures."""


class AuthFailure(MemoClientError):
    """The entered code was rejected by the server."""


class TransportFailure(MemoClientError):
    """Network problem, unexpected status or undecodable body."""


class ApiStatusError(TransportFailure):
    def __init__(self, method: str, path: str, status: int):
        super().__init__(f"{method} {path} -> HTTP {status}")
        self.method = method
        self.path = path
        self.status = status
