"""Custom exceptions for the Toss Payments client."""

from typing import Any


class TossPaymentsError(Exception):
    """Base exception for client-side failures."""

    pass


class MalformedResponse(TossPaymentsError):
    """
    Raised when a success-shaped response breaks the provider contract.

    This is a TERMINAL integration error: a required field is missing, a
    timestamp does not parse, or a value has the wrong JSON type. It is
    distinct from a provider error body, which is returned as ErrorResult.

    Attributes:
        field: Dotted path of the offending field (e.g. "cancels[0].canceledAt")
        raw_value: The raw value found at that path (None when absent)
    """

    def __init__(self, field: str, raw_value: Any, reason: str) -> None:
        self.field = field
        self.raw_value = raw_value
        self.reason = reason
        super().__init__(f"Malformed response field {field!r}: {reason} (got {raw_value!r})")


class TransportError(TossPaymentsError):
    """
    Raised when the HTTP exchange itself fails.

    Examples:
    - Network timeout
    - Connection errors
    - Response body that is not JSON (e.g. an HTML gateway page)
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class ConfigurationError(TossPaymentsError):
    """Raised when the client is built without usable credentials."""

    pass
