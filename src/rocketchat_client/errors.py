"""Exception hierarchy for REST call failures.

Every failure of a chat operation surfaces as exactly one of the
``RocketChatError`` subclasses below, so callers can tell a rejected
login apart from a server error, a malformed payload or an unreachable
server.
"""

from typing import Any


class RocketChatError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthError(RocketChatError):
    """The server rejected the caller as not logged in (401 or equivalent body)."""

    def __init__(self, message: str, status_code: int = 401, body: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.error = message
        self.body = body


class RequestError(RocketChatError):
    """Non-success response other than an authentication failure."""

    def __init__(self, status_code: int, error: str | None = None, body: Any = None):
        super().__init__(f"HTTP {status_code}: {error}" if error else f"HTTP {status_code}")
        self.status_code = status_code
        self.error = error
        self.body = body


class DecodeError(RocketChatError):
    """A successful response whose body does not match the expected shape."""


class TransportError(RocketChatError):
    """The request never reached the server or no response arrived."""
