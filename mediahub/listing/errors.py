"""Typed failures raised by the listing engine."""

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_ARGUMENT = "invalid_argument"
    UPSTREAM_FAILURE = "upstream_failure"


class ListingError(Exception):
    """Base class for listing failures"""
    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgument(ListingError):
    """Caller-fixable problem with the request (raised before any store call)"""
    kind = ErrorKind.INVALID_ARGUMENT


class UpstreamFailure(ListingError):
    """
    Document store or user lookup failed.

    The message names only the failed sub-operation; the underlying
    exception is chained as __cause__ for logs, never shown to end users.
    """
    kind = ErrorKind.UPSTREAM_FAILURE

    def __init__(self, operation: str):
        super().__init__(f"Upstream failure during {operation}")
        self.operation = operation
