"""Pytest configuration: fake JSONPlaceholder backend and failure capture."""
import json
import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional
import httpx
import pytest

from placeholder_api.errors import StatusCodeMismatchError
from placeholder_api.http.specification import RequestSpecification

BASE_URL = "https://jsonplaceholder.typicode.com"

SEED_USERS: List[Dict[str, Any]] = [
    {
        "id": 1,
        "name": "Leanne Graham",
        "username": "Bret",
        "email": "Sincere@april.biz",
        "address": {
            "street": "Kulas Light",
            "suite": "Apt. 556",
            "city": "Gwenborough",
            "zipcode": "92998-3874",
            "geo": {"lat": "-37.3159", "lng": "81.1496"},
        },
        "phone": "1-770-736-8031 x56442",
        "website": "hildegard.org",
        "company": {
            "name": "Romaguera-Crona",
            "catchPhrase": "Multi-layered client-server neural-net",
            "bs": "harness real-time e-markets",
        },
    },
    {"id": 2, "name": "Ervin Howell", "username": "Antonette", "email": "Shanna@melissa.tv"},
    {"id": 3, "name": "Clementine Bauch", "username": "Samantha", "email": "Nathan@yesenia.net"},
]

SEED_COMMENTS: List[Dict[str, Any]] = [
    {"postId": 1, "id": 1, "name": "id labore ex et quam laborum", "email": "Eliseo@gardner.biz", "body": "laudantium enim quasi"},
    {"postId": 1, "id": 2, "name": "quo vero reiciendis velit", "email": "Jayne_Kuhic@sydney.com", "body": "est natus enim nihil"},
    {"postId": 2, "id": 3, "name": "odio adipisci rerum aut animi", "email": "Nikita@garfield.biz", "body": "quia molestiae reprehenderit"},
    {"postId": 2, "id": 4, "name": "alias odio sit", "email": "Lew@alysha.tv", "body": "non et atque occaecati"},
]

_ROUTE = re.compile(r"^/(?P<resource>users|comments)(?:/(?P<id>[^/]+))?/?$")


class FakePlaceholderApi:
    """In-memory stand-in for JSONPlaceholder, served through httpx.MockTransport."""

    def __init__(self):
        self.collections: Dict[str, List[Dict[str, Any]]] = {
            "users": [dict(u) for u in SEED_USERS],
            "comments": [dict(c) for c in SEED_COMMENTS],
        }
        self.requests: List[httpx.Request] = []
        # Forces every response to this status when set
        self.status_override: Optional[int] = None
        # Replaces every response body with this raw text when set
        self.body_override: Optional[str] = None

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def _find(self, resource: str, raw_id: str) -> Optional[Dict[str, Any]]:
        for item in self.collections[resource]:
            if str(item["id"]) == raw_id:
                return item
        return None

    def _respond(self, status: int, body: Any) -> httpx.Response:
        if self.status_override is not None:
            status = self.status_override
        if self.body_override is not None:
            return httpx.Response(status, text=self.body_override)
        return httpx.Response(status, json=body)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        match = _ROUTE.match(request.url.path)
        if match is None:
            return self._respond(404, {})

        resource, raw_id = match.group("resource"), match.group("id")
        items = self.collections[resource]

        if raw_id is None:
            if request.method == "GET":
                return self._respond(200, items)
            if request.method == "POST":
                payload = json.loads(request.content)
                created = dict(payload)
                created["id"] = max((int(i["id"]) for i in items), default=0) + 1
                items.append(created)
                return self._respond(201, created)
            return self._respond(404, {})

        existing = self._find(resource, raw_id)
        if existing is None:
            return self._respond(404, {})
        if request.method == "GET":
            return self._respond(200, existing)
        if request.method == "PUT":
            payload = json.loads(request.content)
            updated = dict(payload)
            updated["id"] = existing["id"]
            items[items.index(existing)] = updated
            return self._respond(200, updated)
        return self._respond(404, {})


@pytest.fixture
def fake_api() -> FakePlaceholderApi:
    """Fresh in-memory backend per test."""
    return FakePlaceholderApi()


@pytest.fixture
def specification(fake_api) -> RequestSpecification:
    """Request specification routed to the fake backend."""
    return RequestSpecification(BASE_URL, timeout=5.0, transport=fake_api.transport())


@pytest.fixture
def live_specification() -> RequestSpecification:
    """Request specification for the real service. Opt in with RUN_LIVE_TESTS=1."""
    if os.getenv("RUN_LIVE_TESTS") != "1":
        pytest.skip("live API tests disabled (set RUN_LIVE_TESTS=1)")
    return RequestSpecification.from_settings()


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Write the HTTP exchange behind a status-code failure to failures/."""
    outcome = yield
    report = outcome.get_result()

    if report.when != "call" or not report.failed or call.excinfo is None:
        return

    error = call.excinfo.value
    if not isinstance(error, StatusCodeMismatchError) or error.exchange is None:
        return

    output_dir = Path(item.config.rootpath) / "failures"
    output_dir.mkdir(exist_ok=True)

    # Sanitize node id for filename
    safe_name = re.sub(r"[^\w\-]", "_", item.nodeid)
    output_file = output_dir / f"{safe_name}.json"
    output_file.write_text(error.exchange.to_json(), encoding="utf-8")

    print(f"\n[FAILURE CAPTURED] {item.name} -> {output_file}")
