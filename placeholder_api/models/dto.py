"""Resource DTOs exchanged with the JSONPlaceholder API."""
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field


class ResourceDto(BaseModel):
    """Frozen wire record. Upstream camelCase names are used as aliases."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to a JSON-ready request body, omitting unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class Geo(ResourceDto):
    lat: str
    lng: str


class Address(ResourceDto):
    street: Optional[str] = None
    suite: Optional[str] = None
    city: Optional[str] = None
    zipcode: Optional[str] = None
    geo: Optional[Geo] = None


class Company(ResourceDto):
    name: Optional[str] = None
    catch_phrase: Optional[str] = Field(default=None, alias="catchPhrase")
    bs: Optional[str] = None


class UserDto(ResourceDto):
    """A user. The body carries the numeric id the server assigned; paths take it as a string."""
    id: Optional[int] = Field(default=None, description="Server-assigned identifier")
    name: str
    username: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    address: Optional[Address] = None
    company: Optional[Company] = None


class CommentDto(ResourceDto):
    """A comment left on a post."""
    id: Optional[int] = Field(default=None, description="Server-assigned identifier")
    post_id: Optional[int] = Field(default=None, alias="postId")
    name: str = Field(description="Comment title")
    email: str = Field(description="Author email")
    body: str
