"""
Exceptions raised by the Pocket client.

Every failure surfaces as one of the three PocketError subclasses below.
The lower-level exception (requests, json) is kept as __cause__.
"""

from typing import Optional


class PocketError(Exception):
    """Base class for all Pocket client errors."""


class TransportError(PocketError):
    """The request never produced a response (connection, TLS, timeout)."""


class DecodeError(PocketError):
    """The response could not be turned into the expected result.

    Covers non-2xx responses, bodies that are not JSON and JSON that does not
    have the expected shape. The raw body is kept because Pocket reports
    failures in more than one format.
    """

    def __init__(
        self,
        message: str,
        body: Optional[str] = None,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
    ):
        super().__init__(message)
        self.body = body
        self.status_code = status_code
        self.error_code = error_code


class RemoteError(PocketError):
    """Pocket processed the request but answered with an ``error`` field."""

    def __init__(self, error: str, body: Optional[str] = None):
        super().__init__(f"Pocket API error: {error}")
        self.error = error
        self.body = body
