"""Exceptions raised by endpoint calls."""
from typing import Any, Optional

from placeholder_api.http.exchange import ExchangeRecord


class PlaceholderApiError(Exception):
    """Base class for client errors."""


class StatusCodeMismatchError(PlaceholderApiError, AssertionError):
    """
    Observed HTTP status differs from the expected one.

    Subclasses AssertionError so a mismatch inside a test is reported
    as a test failure, not an error.
    """

    def __init__(self, expected: int, actual: int, exchange: Optional[ExchangeRecord] = None):
        self.expected = expected
        self.actual = actual
        self.exchange = exchange
        message = f"Expected status code <{expected}> but was <{actual}>"
        if exchange is not None:
            message += f" for {exchange.request.method} {exchange.request.url}"
        super().__init__(message)


class HeaderMismatchError(PlaceholderApiError, AssertionError):
    """A response header is missing or has an unexpected value."""

    def __init__(self, name: str, expected: str, actual: Optional[str]):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected header {name!r} to be {expected!r} but was {actual!r}")


class DeserializationError(PlaceholderApiError):
    """Response body could not be parsed into the requested type."""

    def __init__(self, target: str, body: Any, reason: str):
        self.target = target
        self.body = body
        self.reason = reason
        super().__init__(f"Cannot deserialize response body as {target}: {reason}")
