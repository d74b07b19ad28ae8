"""Typed JSONPlaceholder endpoint client for API tests."""
from placeholder_api.endpoints import CommentEndpoint, ResourceEndpoint, UserEndpoint
from placeholder_api.errors import (
    DeserializationError,
    HeaderMismatchError,
    PlaceholderApiError,
    StatusCodeMismatchError,
)
from placeholder_api.http import HttpStatus, RequestSpecification, ValidatableResponse
from placeholder_api.models.dto import CommentDto, UserDto

__all__ = [
    "CommentEndpoint",
    "ResourceEndpoint",
    "UserEndpoint",
    "CommentDto",
    "UserDto",
    "HttpStatus",
    "RequestSpecification",
    "ValidatableResponse",
    "PlaceholderApiError",
    "StatusCodeMismatchError",
    "DeserializationError",
    "HeaderMismatchError",
]
