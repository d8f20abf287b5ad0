"""Tests for the Jira field HTTP client."""

from __future__ import annotations

import httpx
import pytest

from jirafields.client.jira import JiraFieldClient
from jirafields.exceptions import UpstreamError

FIELDS = [
    {"id": "summary", "name": "Summary", "custom": False, "schema": {"type": "string"}},
    {"id": "customfield_10016", "name": "Story Points", "custom": True, "schema": {"type": "number"}},
]


def _client(handler, token: str | None = "secret") -> JiraFieldClient:
    transport = httpx.MockTransport(handler)
    return JiraFieldClient(
        "https://jira.example.com/",
        personal_token=token,
        client=httpx.AsyncClient(transport=transport),
    )


class TestFetchRemoteFields:
    """Test GET /rest/api/2/field."""

    @pytest.mark.asyncio
    async def test_returns_records(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=FIELDS)

        client = _client(handler)
        records = await client.fetch_remote_fields("issue")

        assert records == FIELDS
        assert str(seen[0].url) == "https://jira.example.com/rest/api/2/field"
        assert seen[0].method == "GET"
        assert seen[0].headers["Authorization"] == "Bearer secret"

    @pytest.mark.asyncio
    async def test_no_token_no_auth_header(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[])

        await _client(handler, token=None).fetch_remote_fields("issue")
        assert "Authorization" not in seen[0].headers

    @pytest.mark.asyncio
    async def test_http_error_status(self) -> None:
        client = _client(lambda request: httpx.Response(401, json={"message": "nope"}))
        with pytest.raises(UpstreamError) as exc_info:
            await client.fetch_remote_fields("issue")
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(UpstreamError, match="failed"):
            await _client(handler).fetch_remote_fields("issue")

    @pytest.mark.asyncio
    async def test_invalid_json(self) -> None:
        client = _client(lambda request: httpx.Response(200, content=b"<html>"))
        with pytest.raises(UpstreamError, match="Invalid JSON"):
            await client.fetch_remote_fields("issue")

    @pytest.mark.asyncio
    async def test_non_array_payload(self) -> None:
        client = _client(lambda request: httpx.Response(200, json={"fields": FIELDS}))
        with pytest.raises(UpstreamError, match="JSON array"):
            await client.fetch_remote_fields("issue")

    @pytest.mark.asyncio
    async def test_non_object_items_dropped(self) -> None:
        client = _client(lambda request: httpx.Response(200, json=[FIELDS[0], "junk", 3]))
        assert await client.fetch_remote_fields("issue") == [FIELDS[0]]


class TestLifecycle:
    """Test client ownership and closing."""

    def test_requires_base_url(self) -> None:
        with pytest.raises(ValueError):
            JiraFieldClient("")

    def test_field_url(self) -> None:
        client = JiraFieldClient("https://jira.example.com/")
        assert client.base_url == "https://jira.example.com"
        assert client.field_url == "https://jira.example.com/rest/api/2/field"

    @pytest.mark.asyncio
    async def test_shared_client_not_closed(self) -> None:
        shared = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200, json=[])))
        async with JiraFieldClient("https://jira.example.com", client=shared) as client:
            await client.fetch_remote_fields("issue")
        assert shared.is_closed is False
        await shared.aclose()

    @pytest.mark.asyncio
    async def test_owned_client_closed(self) -> None:
        client = JiraFieldClient("https://jira.example.com")
        await client.aclose()  # nothing created yet
        assert client._client is None
