"""Typed resource endpoints."""
from placeholder_api.endpoints.comments import CommentEndpoint
from placeholder_api.endpoints.resource import ResourceEndpoint
from placeholder_api.endpoints.users import UserEndpoint

__all__ = ["ResourceEndpoint", "UserEndpoint", "CommentEndpoint"]
