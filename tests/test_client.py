"""Tests for the HTTP client and settings."""

import json

import httpx
import pytest

from onedrive_excel.client import SESSION_HEADER, OneDriveClient, get_onedrive_client
from onedrive_excel.errors import StatusCodeError


def make_client(handler, **kwargs) -> OneDriveClient:
    return OneDriveClient(
        access_token="tok",
        base_url="https://graph.example.com/v1.0",
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


class TestDoFetch:
    @pytest.mark.asyncio
    async def test_get_json(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"value": [{"name": "Sheet1"}]})

        client = make_client(handler)
        result = await client.do_fetch("/me/drive/items/1/workbook/worksheets")

        assert result == {"value": [{"name": "Sheet1"}]}
        request = seen[0]
        assert request.method == "GET"
        assert str(request.url) == "https://graph.example.com/v1.0/me/drive/items/1/workbook/worksheets"
        assert request.headers["Authorization"] == "Bearer tok"
        assert SESSION_HEADER not in request.headers

    @pytest.mark.asyncio
    async def test_post_json_body_and_session_header(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201, json={"name": "New"})

        client = make_client(handler)
        client.set_workbook_session_id("sess-1")

        await client.do_fetch(
            "me/workbook/worksheets",
            method="POST",
            body={"name": "New"},
            headers={"content-type": "application/json"},
        )

        request = seen[0]
        assert request.method == "POST"
        assert json.loads(request.content) == {"name": "New"}
        assert request.headers[SESSION_HEADER] == "sess-1"

    @pytest.mark.asyncio
    async def test_absolute_url_used_as_is(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, json={})

        await make_client(handler).do_fetch("https://other.example.com/x")

        assert seen == ["https://other.example.com/x"]

    @pytest.mark.asyncio
    async def test_empty_body_returns_empty_dict(self):
        client = make_client(lambda request: httpx.Response(204))

        assert await client.do_fetch("/x", method="DELETE") == {}

    @pytest.mark.asyncio
    async def test_raw_returns_text(self):
        client = make_client(lambda request: httpx.Response(200, text="plain"))

        assert await client.do_fetch("/x", raw=True) == "plain"

    @pytest.mark.asyncio
    async def test_network_error_propagates(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(httpx.ConnectError):
            await make_client(handler).do_fetch("/x")

    @pytest.mark.asyncio
    async def test_error_status_raises(self):
        client = make_client(lambda request: httpx.Response(404, text="ItemNotFound"))

        with pytest.raises(StatusCodeError) as exc_info:
            await client.do_fetch("/missing")

        assert exc_info.value.status_code == 404
        assert "ItemNotFound" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_workbook_session_round_trip(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append((request.url.path, request.headers.get(SESSION_HEADER)))
            if request.url.path.endswith("/createSession"):
                return httpx.Response(201, json={"id": "sess-9"})
            return httpx.Response(204)

        client = make_client(handler)
        workbook = client.workbook("/me/drive/items/1/workbook")

        assert await workbook.create_session() == "sess-9"
        await workbook.refresh_session()
        await workbook.close_session()

        assert client.workbook_session_id is None
        assert calls == [
            ("/v1.0/me/drive/items/1/workbook/createSession", None),
            ("/v1.0/me/drive/items/1/workbook/refreshSession", "sess-9"),
            ("/v1.0/me/drive/items/1/workbook/closeSession", "sess-9"),
        ]


class TestSettings:
    def test_client_singleton_from_settings(self, monkeypatch):
        monkeypatch.setenv("GRAPH_ACCESS_TOKEN", "env-token")
        monkeypatch.setenv("GRAPH_BASE_URL", "https://graph.example.com/beta/")

        client = get_onedrive_client()

        assert client is get_onedrive_client()
        assert client.access_token == "env-token"
        assert client.base_url == "https://graph.example.com/beta"
