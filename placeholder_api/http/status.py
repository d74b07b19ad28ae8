"""HTTP status codes used in endpoint assertions."""
from enum import Enum


class HttpStatus(Enum):
    """Named HTTP status codes. Each variant carries exactly one numeric code."""
    OK = 200
    CREATED = 201
    ACCEPTED = 202
    NO_CONTENT = 204
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    CONFLICT = 409
    UNPROCESSABLE_ENTITY = 422
    INTERNAL_SERVER_ERROR = 500
    SERVICE_UNAVAILABLE = 503

    @property
    def code(self) -> int:
        return self.value

    @classmethod
    def from_code(cls, code: int) -> "HttpStatus":
        """Look up the variant for a numeric code; raises ValueError if unknown."""
        try:
            return cls(code)
        except ValueError:
            raise ValueError(f"Unknown HTTP status code: {code}") from None

    def __str__(self) -> str:
        return f"{self.code} {self.name}"
