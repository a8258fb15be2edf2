"""
Errors
======

Closed error taxonomy for the comment client.

Every failure raised by the client is a `CommentAPIError` carrying exactly one
`ErrorKind`:

    MALFORMED_REQUEST   → outgoing payload could not be encoded as JSON
    MALFORMED_RESPONSE  → body was not JSON, or lacked required fields
    HTTP_ERROR          → status outside {200, 201}; carries the status code
    TRANSPORT_FAILURE   → the sender failed before a response was received

HTTP failures use a single parameterized exception rather than one class per
status, so callers branch on `status_code` (or the range helpers) instead:

    try:
        client.list_comments()
    except CommentHTTPStatusError as exc:
        if exc.is_rate_limited:
            ...
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    MALFORMED_REQUEST = "malformed-request"
    MALFORMED_RESPONSE = "malformed-response"
    HTTP_ERROR = "http-error"
    TRANSPORT_FAILURE = "transport-failure"


class CommentAPIError(Exception):
    """Base exception for all errors raised by the comment client."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MalformedRequestError(CommentAPIError):
    """Raised when a request payload cannot be encoded as JSON."""

    kind = ErrorKind.MALFORMED_REQUEST


class MalformedResponseError(CommentAPIError):
    """Raised when a response body is not JSON or does not have the expected shape."""

    kind = ErrorKind.MALFORMED_RESPONSE


class CommentHTTPStatusError(CommentAPIError):
    """
    Raised when the server answers with a status other than 200 or 201.

    Attributes:
        status_code:
            Numeric HTTP status returned by the server.
        reason:
            Reason phrase for the status, or a generic message when the
            status has none.
    """

    kind = ErrorKind.HTTP_ERROR

    def __init__(self, status_code: int, reason: Optional[str] = None) -> None:
        self.status_code = status_code
        self.reason = reason or "Unhandled HTTP status"
        super().__init__(f"{status_code}: {self.reason}")

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    @property
    def is_server_error(self) -> bool:
        return 500 <= self.status_code < 600

    @property
    def is_rate_limited(self) -> bool:
        return self.status_code == 429


class TransportFailureError(CommentAPIError):
    """Raised when the HTTP sender failed before a response was received."""

    kind = ErrorKind.TRANSPORT_FAILURE


__all__ = [
    "ErrorKind",
    "CommentAPIError",
    "MalformedRequestError",
    "MalformedResponseError",
    "CommentHTTPStatusError",
    "TransportFailureError",
]
