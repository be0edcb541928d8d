"""Typed errors surfaced at the HTTP boundary.

Every failure a handler can report is a ``StorefrontError`` carrying an
``ErrorKind``; the application serialises them uniformly as
``{"error": message}`` with the status code of their kind.
"""

from enum import Enum


class ErrorKind(str, Enum):
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"
    CONFIGURATION = "configuration"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
    ErrorKind.CONFIGURATION: 500,
}

INTERNAL_ERROR_MESSAGE = "Internal server error"


class StorefrontError(Exception):
    """Base class for errors with a kind and a caller-safe message."""

    kind: ErrorKind = ErrorKind.INTERNAL
    message: str = INTERNAL_ERROR_MESSAGE

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    def to_payload(self) -> dict[str, str]:
        return {"error": self.message}


class QueryParameterRequired(StorefrontError):
    kind = ErrorKind.BAD_REQUEST
    message = "Query parameter is required"


class ProductNotFound(StorefrontError):
    kind = ErrorKind.NOT_FOUND
    message = "Product not found"


class DatabaseUnavailable(StorefrontError):
    """The document store could not be reached or rejected the query."""

    kind = ErrorKind.INTERNAL


class PaymentConfigurationError(StorefrontError):
    """A required payment-provider setting is missing."""

    kind = ErrorKind.CONFIGURATION
