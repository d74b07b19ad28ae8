"""HTTP substrate: request specification, verb calls and response assertions."""
from placeholder_api.http.base_endpoint import AbstractWebEndpoint, build_path
from placeholder_api.http.response import ExtractableResponse, ValidatableResponse
from placeholder_api.http.specification import RequestSpecification
from placeholder_api.http.status import HttpStatus

__all__ = [
    "AbstractWebEndpoint",
    "build_path",
    "ExtractableResponse",
    "ValidatableResponse",
    "RequestSpecification",
    "HttpStatus",
]
