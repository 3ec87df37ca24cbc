from __future__ import annotations

from collections.abc import Collection
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from transifex_client.client.http_client import ErrorDetails


class TransifexError(Exception):
    def __repr__(self) -> str:
        # Repr is what is called by rich when the exception is printed.
        return str(self)


class TransifexConfigError(TransifexError):
    pass


class TransifexValidationError(TransifexError):
    """Raised when a parameter object cannot be turned into a query string.

    No request is sent when this is raised.
    """


class MissingParameterError(TransifexValidationError):
    def __init__(self, field: str) -> None:
        super().__init__(f"Mandatory parameter {field!r} is missing")
        self.field = field


class InvalidEnumValueError(TransifexValidationError):
    def __init__(self, field: str, value: str, allowed: Collection[str]) -> None:
        super().__init__(f"Unknown {field!r} value {value!r}. Expected one of: {', '.join(allowed)}")
        self.field = field
        self.value = value
        self.allowed = tuple(allowed)


class InvalidRangeError(TransifexValidationError):
    def __init__(self, field: str, value: object, minimum: int, maximum: int) -> None:
        super().__init__(f"Value of {field!r} should be an integer in the range [{minimum}..{maximum}], got {value!r}")
        self.field = field
        self.value = value
        self.minimum = minimum
        self.maximum = maximum


class TransifexTransportError(TransifexError):
    """The request could not be sent or no response was received."""


class TransifexDecodeError(TransifexError):
    """The response body is not valid JSON or not the expected JSON:API envelope."""

    def __init__(self, message: str, body: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.body = body


class TransifexAPIError(TransifexDecodeError):
    """The service answered with a JSON:API error document instead of data."""

    def __init__(
        self,
        message: str,
        status_code: int,
        errors: list[ErrorDetails] | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message, body=body)
        self.status_code = status_code
        self.errors = errors or []
