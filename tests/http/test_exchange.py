"""Unit tests for exchange records."""
import json
import httpx
from placeholder_api.http.exchange import ExchangeRecord, RequestRecord, ResponseRecord, record_exchange


def test_record_exchange_captures_request_and_response():
    """Test JSON payloads and bodies are parsed into the record."""
    request = httpx.Request("POST", "https://api.test/comments", json={"name": "n"})
    response = httpx.Response(201, json={"id": 501, "name": "n"}, request=request)

    exchange = record_exchange(response)

    assert exchange.request.method == "POST"
    assert exchange.request.url == "https://api.test/comments"
    assert exchange.request.payload == {"name": "n"}
    assert exchange.response.status_code == 201
    assert exchange.response.body == {"id": 501, "name": "n"}
    assert exchange.response.elapsed_ms is None


def test_record_exchange_keeps_text_body():
    request = httpx.Request("GET", "https://api.test/users/1")
    response = httpx.Response(500, text="Internal Server Error", request=request)

    assert record_exchange(response).response.body == "Internal Server Error"


def test_to_json():
    exchange = ExchangeRecord(
        request=RequestRecord(method="GET", url="https://api.test/users"),
        response=ResponseRecord(status_code=200, body=[]),
    )
    data = json.loads(exchange.to_json())
    assert data["request"]["method"] == "GET"
    assert data["response"]["status_code"] == 200
    assert "timestamp" in data
