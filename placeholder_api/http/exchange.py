"""Request/response snapshots attached to validated responses and failures."""
import json
from datetime import datetime
from typing import Any, Dict, Optional
import httpx
from pydantic import BaseModel, Field


class RequestRecord(BaseModel):
    """Captured HTTP request data."""
    method: str = Field(description="HTTP method (GET, POST, etc.)")
    url: str = Field(description="Full request URL")
    payload: Optional[Any] = Field(default=None, description="Request body/payload")
    headers: Dict[str, str] = Field(default_factory=dict)


class ResponseRecord(BaseModel):
    """Captured HTTP response data."""
    status_code: int
    body: Any = Field(default=None, description="Response body (parsed JSON or raw text)")
    headers: Dict[str, str] = Field(default_factory=dict)
    elapsed_ms: Optional[float] = Field(default=None, description="Round trip time in milliseconds")


class ExchangeRecord(BaseModel):
    """One request and the response it produced."""
    request: RequestRecord
    response: ResponseRecord
    timestamp: str = Field(default_factory=lambda: datetime.now().isoformat())

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return self.model_dump()

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, default=str)


def _read_body(content: bytes, text: str) -> Any:
    if not content:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return text


def record_exchange(response: httpx.Response) -> ExchangeRecord:
    """
    Snapshot an httpx response and the request that produced it.

    Args:
        response: A response whose body has already been read

    Returns:
        ExchangeRecord safe to keep after the client is closed
    """
    request = response.request
    elapsed_ms = None
    try:
        elapsed_ms = round(response.elapsed.total_seconds() * 1000, 2)
    except RuntimeError:
        # elapsed is only set once the response is closed by a client
        pass

    request_body = request.content
    return ExchangeRecord(
        request=RequestRecord(
            method=request.method,
            url=str(request.url),
            payload=_read_body(request_body, request_body.decode("utf-8", errors="replace")),
            headers=dict(request.headers),
        ),
        response=ResponseRecord(
            status_code=response.status_code,
            body=_read_body(response.content, response.text),
            headers=dict(response.headers),
            elapsed_ms=elapsed_ms,
        ),
    )
