"""Request specification shared by every endpoint call."""
from typing import Dict, Optional
import httpx

from config.settings import Settings, load_settings

DEFAULT_HEADERS: Dict[str, str] = {
    "Accept": "application/json",
    "Content-Type": "application/json; charset=UTF-8",
}


class RequestSpecification:
    """
    Connection parameters for the target API: base URL, headers and timeout.

    Instances are immutable; use with_headers() to derive a new one.
    A transport can be injected to route requests somewhere other than
    the network (httpx.MockTransport in tests).
    """

    def __init__(
        self,
        base_url: str,
        headers: Optional[Dict[str, str]] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        merged = dict(DEFAULT_HEADERS)
        if headers:
            merged.update(headers)
        self._headers = merged
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "RequestSpecification":
        """Build a specification from environment configuration."""
        settings = settings or load_settings()
        return cls(settings.base_url, timeout=settings.timeout, transport=transport)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._headers)

    @property
    def timeout(self) -> float:
        return self._timeout

    def with_headers(self, headers: Dict[str, str]) -> "RequestSpecification":
        """Return a copy with extra headers merged over the current ones."""
        merged = dict(self._headers)
        merged.update(headers)
        return RequestSpecification(
            self._base_url,
            headers=merged,
            timeout=self._timeout,
            transport=self._transport,
        )

    def client(self) -> httpx.Client:
        """Open a new httpx client for one call. Caller closes it."""
        return httpx.Client(
            base_url=self._base_url,
            headers=self._headers,
            timeout=httpx.Timeout(self._timeout),
            transport=self._transport,
        )

    def __repr__(self) -> str:
        return f"RequestSpecification(base_url={self._base_url!r}, timeout={self._timeout})"
