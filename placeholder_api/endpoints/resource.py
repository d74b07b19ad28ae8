"""Generic typed CRUD endpoint over one REST resource."""
import logging
from typing import Generic, List, Optional, Type, TypeVar, Union, overload

from placeholder_api.http.base_endpoint import AbstractWebEndpoint
from placeholder_api.http.response import ValidatableResponse
from placeholder_api.http.status import HttpStatus
from placeholder_api.models.dto import ResourceDto

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=ResourceDto)
ID = TypeVar("ID", int, str)


class ResourceEndpoint(AbstractWebEndpoint, Generic[R, ID]):
    """
    Create, update, get and list one resource type.

    Subclasses set resource_name, collection_path, resource_path and dto_type.

    Every operation takes an optional ``expected`` status. Without it the
    conventional success code is asserted (CREATED for create, OK otherwise)
    and the body is parsed into ``dto_type``. With it, that status is
    asserted instead and the ValidatableResponse is returned unparsed.

    Example:
        spec = RequestSpecification.from_settings()
        users = UserEndpoint(spec)
        created = users.create(UserDto(name="Ada"))
        users.get_by_id("999", HttpStatus.NOT_FOUND)
    """

    resource_name: str
    collection_path: str
    resource_path: str
    dto_type: Type[R]

    @overload
    def create(self, dto: R) -> R: ...

    @overload
    def create(self, dto: R, expected: HttpStatus) -> ValidatableResponse: ...

    def create(self, dto: R, expected: Optional[HttpStatus] = None) -> Union[R, ValidatableResponse]:
        """POST dto to the collection path."""
        logger.info(f"Create new {self.resource_name}")
        response = self.post(self.specification, self.collection_path, dto.to_payload())
        if expected is not None:
            return response.status_code(expected)
        return response.status_code(HttpStatus.CREATED).extract().as_(self.dto_type)

    @overload
    def update(self, id: ID, dto: R) -> R: ...

    @overload
    def update(self, id: ID, dto: R, expected: HttpStatus) -> ValidatableResponse: ...

    def update(self, id: ID, dto: R, expected: Optional[HttpStatus] = None) -> Union[R, ValidatableResponse]:
        """PUT dto to the single-resource path for id."""
        logger.info(f"Update {self.resource_name} by id [{id}]")
        response = self.put(self.specification, self.resource_path, dto.to_payload(), id)
        if expected is not None:
            return response.status_code(expected)
        return response.status_code(HttpStatus.OK).extract().as_(self.dto_type)

    @overload
    def get_by_id(self, id: ID) -> R: ...

    @overload
    def get_by_id(self, id: ID, expected: HttpStatus) -> ValidatableResponse: ...

    def get_by_id(self, id: ID, expected: Optional[HttpStatus] = None) -> Union[R, ValidatableResponse]:
        """GET the single-resource path for id."""
        logger.info(f"Get {self.resource_name} by id [{id}]")
        response = self.get(self.specification, self.resource_path, id)
        if expected is not None:
            return response.status_code(expected)
        return response.status_code(HttpStatus.OK).extract().as_(self.dto_type)

    @overload
    def get_all(self) -> List[R]: ...

    @overload
    def get_all(self, expected: HttpStatus) -> ValidatableResponse: ...

    def get_all(self, expected: Optional[HttpStatus] = None) -> Union[List[R], ValidatableResponse]:
        """GET the collection path. Items keep the order the server sent them in."""
        logger.info(f"Get all {self.resource_name}s")
        response = self.get(self.specification, self.collection_path)
        if expected is not None:
            return response.status_code(expected)
        return response.status_code(HttpStatus.OK).extract().as_list(self.dto_type)
