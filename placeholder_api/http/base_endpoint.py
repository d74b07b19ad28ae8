"""Low-level verb methods shared by resource endpoints."""
import logging
import re
from typing import Any, Dict, Optional

from placeholder_api.http.response import ValidatableResponse
from placeholder_api.http.specification import RequestSpecification

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")


def build_path(template: str, *path_params: Any) -> str:
    """
    Fill {placeholders} in a path template positionally.

    Args:
        template: Path such as "/users/{userID}"
        *path_params: One value per placeholder, in order

    Returns:
        Path with each placeholder replaced by str(value)

    Raises:
        ValueError: number of params differs from number of placeholders
    """
    placeholders = _PLACEHOLDER.findall(template)
    if len(placeholders) != len(path_params):
        raise ValueError(
            f"Path template {template!r} has {len(placeholders)} placeholder(s) "
            f"but {len(path_params)} path param(s) were given"
        )
    values = iter(path_params)
    return _PLACEHOLDER.sub(lambda _: str(next(values)), template)


class AbstractWebEndpoint:
    """Base class giving endpoints get/post/put against a request specification."""

    def __init__(self, specification: RequestSpecification):
        self.specification = specification

    def _request(
        self,
        method: str,
        specification: RequestSpecification,
        path_template: str,
        body: Optional[Dict[str, Any]],
        path_params: tuple,
    ) -> ValidatableResponse:
        path = build_path(path_template, *path_params)
        logger.debug(f"{method} {specification.base_url}{path}")
        with specification.client() as client:
            response = client.request(method, path, json=body)
        logger.debug(f"{method} {path} -> {response.status_code}")
        return ValidatableResponse(response)

    def get(self, specification: RequestSpecification, path_template: str, *path_params: Any) -> ValidatableResponse:
        return self._request("GET", specification, path_template, None, path_params)

    def post(
        self,
        specification: RequestSpecification,
        path_template: str,
        body: Dict[str, Any],
        *path_params: Any,
    ) -> ValidatableResponse:
        return self._request("POST", specification, path_template, body, path_params)

    def put(
        self,
        specification: RequestSpecification,
        path_template: str,
        body: Dict[str, Any],
        *path_params: Any,
    ) -> ValidatableResponse:
        return self._request("PUT", specification, path_template, body, path_params)
