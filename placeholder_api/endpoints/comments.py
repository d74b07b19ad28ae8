"""Endpoint for /comments."""
from placeholder_api.endpoints.resource import ResourceEndpoint
from placeholder_api.models.dto import CommentDto


class CommentEndpoint(ResourceEndpoint[CommentDto, int]):
    resource_name = "Comment"
    collection_path = "/comments"
    resource_path = "/comments/{commentID}"
    dto_type = CommentDto
