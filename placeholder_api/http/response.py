"""Validated response handle returned by every verb call."""
import logging
from typing import Any, List, Optional, Type, TypeVar
import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from placeholder_api.errors import DeserializationError, HeaderMismatchError, StatusCodeMismatchError
from placeholder_api.http.exchange import ExchangeRecord, record_exchange
from placeholder_api.http.status import HttpStatus

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ExtractableResponse:
    """One-shot access to a response body."""

    def __init__(self, response: httpx.Response):
        self._response = response

    @property
    def response(self) -> httpx.Response:
        return self._response

    def json(self) -> Any:
        """Parse the body as JSON; raises DeserializationError on bad JSON."""
        try:
            return self._response.json()
        except ValueError as e:
            raise DeserializationError("JSON", self._response.text, str(e)) from e

    def path(self, key: str) -> Any:
        """Return a top-level field of a JSON object body."""
        body = self.json()
        if not isinstance(body, dict):
            raise DeserializationError("object", body, f"cannot read {key!r} from {type(body).__name__}")
        if key not in body:
            raise DeserializationError("object", body, f"field {key!r} not present")
        return body[key]

    def as_(self, model: Type[ModelT]) -> ModelT:
        """Deserialize the body into a single model instance."""
        body = self.json()
        try:
            return model.model_validate(body)
        except ValidationError as e:
            raise DeserializationError(model.__name__, body, str(e)) from e

    def as_list(self, model: Type[ModelT]) -> List[ModelT]:
        """Deserialize a JSON array body into models, keeping server order."""
        body = self.json()
        try:
            return TypeAdapter(List[model]).validate_python(body)
        except ValidationError as e:
            raise DeserializationError(f"List[{model.__name__}]", body, str(e)) from e


class ValidatableResponse:
    """Wraps one HTTP response and supports chained assertions."""

    def __init__(self, response: httpx.Response):
        self._response = response
        self._exchange: Optional[ExchangeRecord] = None

    @property
    def response(self) -> httpx.Response:
        return self._response

    @property
    def exchange(self) -> ExchangeRecord:
        """Snapshot of the request and response, built on first access."""
        if self._exchange is None:
            self._exchange = record_exchange(self._response)
        return self._exchange

    def status_code(self, expected) -> "ValidatableResponse":
        """
        Assert the response status.

        Args:
            expected: HttpStatus or plain integer code

        Returns:
            self, for chaining

        Raises:
            StatusCodeMismatchError: observed status differs from expected
        """
        code = expected.code if isinstance(expected, HttpStatus) else int(expected)
        actual = self._response.status_code
        if actual != code:
            logger.debug(f"Status mismatch: expected {code}, got {actual} for {self._response.request.url}")
            raise StatusCodeMismatchError(code, actual, self.exchange)
        return self

    def header(self, name: str, expected: str) -> "ValidatableResponse":
        """Assert a response header equals the expected value."""
        actual = self._response.headers.get(name)
        if actual != expected:
            raise HeaderMismatchError(name, expected, actual)
        return self

    def content_type(self, expected: str) -> "ValidatableResponse":
        """Assert the Content-Type header starts with the expected media type."""
        actual = self._response.headers.get("content-type")
        if actual is None or not actual.startswith(expected):
            raise HeaderMismatchError("content-type", expected, actual)
        return self

    def extract(self) -> ExtractableResponse:
        return ExtractableResponse(self._response)

    def __repr__(self) -> str:
        request = self._response.request
        return f"<ValidatableResponse {request.method} {request.url} [{self._response.status_code}]>"
