"""Endpoint for /users."""
from placeholder_api.endpoints.resource import ResourceEndpoint
from placeholder_api.models.dto import UserDto


class UserEndpoint(ResourceEndpoint[UserDto, str]):
    """Users are addressed by string id."""
    resource_name = "User"
    collection_path = "/users"
    resource_path = "/users/{userID}"
    dto_type = UserDto
