"""Unit tests for SpeedrunClient."""

from __future__ import annotations

import json

import httpx
import pytest

from srnotify.cli.api_client import SpeedrunClient
from srnotify.constants import BASE_URL
from srnotify.errors import APIError, DecodeError, NetworkError


def _client(handler) -> SpeedrunClient:  # type: ignore[no-untyped-def]
    return SpeedrunClient("sess-123", transport=httpx.MockTransport(handler))


@pytest.mark.unit
def test_fetch_sends_fixed_request(sample_payload: dict[str, object]) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=sample_payload)

    with _client(handler) as client:
        client.fetch_notifications()

    assert len(seen) == 1
    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == f"{BASE_URL}/GetNotifications"
    assert json.loads(request.content) == {"u": 1, "i": 1}
    assert request.headers["cookie"] == "PHPSESSID=sess-123"
    assert request.headers["origin"] == "https://www.speedrun.com"
    assert request.headers["referer"] == "https://www.speedrun.com/notifications"
    assert request.headers["accept"] == "application/json"
    assert "Chrome/" in request.headers["user-agent"]


@pytest.mark.unit
def test_fetch_decodes_response(sample_payload: dict[str, object]) -> None:
    with _client(lambda request: httpx.Response(200, json=sample_payload)) as client:
        result = client.fetch_notifications()

    assert result.unread_count == 2
    assert [n.id for n in result.notifications] == ["n1", "n2", "n3"]
    assert result.notifications[1].read is True
    assert result.notifications[0].date == 1700000000
    assert result.pagination.per == 50


@pytest.mark.unit
def test_non_success_status_raises_api_error_without_decoding() -> None:
    with _client(lambda request: httpx.Response(401, text="Unauthorized")) as client:
        with pytest.raises(APIError) as exc_info:
            client.fetch_notifications()

    assert exc_info.value.status_code == 401
    assert exc_info.value.body == "Unauthorized"
    assert "401" in str(exc_info.value)
    assert "Unauthorized" in str(exc_info.value)


@pytest.mark.unit
def test_malformed_body_raises_decode_error() -> None:
    with _client(lambda request: httpx.Response(200, text="{not json")) as client:
        with pytest.raises(DecodeError) as exc_info:
            client.fetch_notifications()

    assert exc_info.value.cause is exc_info.value.__cause__


@pytest.mark.unit
def test_wrong_field_type_raises_decode_error() -> None:
    payload = {"unreadCount": "many", "notifications": [], "pagination": {}}
    with _client(lambda request: httpx.Response(200, json=payload)) as client:
        with pytest.raises(DecodeError):
            client.fetch_notifications()


@pytest.mark.unit
def test_string_typed_scalars_raise_decode_error() -> None:
    payload = {
        "unreadCount": "5",
        "notifications": [{"id": "a", "read": "true", "date": "1700000000"}],
    }
    with _client(lambda request: httpx.Response(200, json=payload)) as client:
        with pytest.raises(DecodeError):
            client.fetch_notifications()


@pytest.mark.unit
def test_null_collections_decode_as_empty() -> None:
    payload = {"unreadCount": 0, "notifications": None, "pagination": None}
    with _client(lambda request: httpx.Response(200, json=payload)) as client:
        result = client.fetch_notifications()

    assert result.notifications == ()
    assert result.pagination.pages == 0


@pytest.mark.unit
def test_timeout_raises_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with _client(handler) as client:
        with pytest.raises(NetworkError) as exc_info:
            client.fetch_notifications()

    assert isinstance(exc_info.value.cause, httpx.ReadTimeout)


@pytest.mark.unit
def test_connect_failure_raises_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with _client(handler) as client:
        with pytest.raises(NetworkError):
            client.fetch_notifications()


@pytest.mark.unit
def test_no_retry_after_failure() -> None:
    calls: list[int] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(1)
        return httpx.Response(503, text="busy")

    with _client(handler) as client:
        with pytest.raises(APIError):
            client.fetch_notifications()

    assert len(calls) == 1
