import pytest
from unittest.mock import AsyncMock, MagicMock, patch

import httpx

from buymeacoffee.http import HttpClient


class TestHttpClientInit:
    def test_creates_async_client_when_none_injected(self):
        with patch("buymeacoffee.http.httpx.AsyncClient") as mock_client_cls:
            HttpClient(base_url="https://example.com", timeout=(2, 10))
            mock_client_cls.assert_called_once()

    def test_uses_injected_client_as_is(self):
        with patch("buymeacoffee.http.httpx.AsyncClient") as mock_client_cls:
            injected_client = AsyncMock()
            HttpClient(base_url="https://example.com", client=injected_client)
            mock_client_cls.assert_not_called()

    def test_strips_trailing_slash_from_base_url(self):
        client = HttpClient(base_url="https://example.com/", client=AsyncMock())
        assert client.base_url == "https://example.com"


class TestHttpClientRequest:
    def setup_method(self):
        self.mock_client = AsyncMock()
        self.client = HttpClient(
            base_url="https://example.com/api",
            client=self.mock_client,
            headers={"User-Agent": "test-agent"},
        )

    async def test_returns_raw_response(self):
        response = httpx.Response(200, json={"ok": True})
        self.mock_client.request.return_value = response
        result = await self.client.get("/v1/supporters")
        assert result is response

    async def test_does_not_raise_on_error_status(self):
        response = httpx.Response(404, json={})
        self.mock_client.request.return_value = response
        result = await self.client.get("/v1/supporters/1")
        assert result.status_code == 404

    async def test_passes_correct_args_to_client(self):
        self.mock_client.request.return_value = httpx.Response(200)
        await self.client.get("/v1/subscriptions", params={"page": 1}, headers={"x-custom": "val"})
        self.mock_client.request.assert_called_once_with(
            "GET",
            "https://example.com/api/v1/subscriptions",
            auth=None,
            headers={"User-Agent": "test-agent", "x-custom": "val"},
            params={"page": 1},
        )

    async def test_reraises_and_logs_on_network_error(self):
        self.mock_client.request.side_effect = httpx.ConnectError("refused", request=MagicMock())

        with patch("buymeacoffee.http.logger") as mock_logger:
            with pytest.raises(httpx.ConnectError):
                await self.client.get("/v1/extras")
            mock_logger.debug.assert_called_once()

    async def test_get_uses_get_method(self):
        self.mock_client.request.return_value = httpx.Response(200)
        await self.client.get("/path")
        assert self.mock_client.request.call_args.args[0] == "GET"

    async def test_aclose_closes_underlying_client(self):
        await self.client.aclose()
        self.mock_client.aclose.assert_awaited_once()


class TestHttpClientDefaults:
    def test_built_client_follows_redirects(self):
        with patch("buymeacoffee.http.httpx.AsyncClient") as mock_client_cls:
            HttpClient(base_url="https://example.com")
            assert mock_client_cls.call_args.kwargs["follow_redirects"] is True

    async def test_follows_redirect_to_final_response(self):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/login":
                return httpx.Response(200, html="<html></html>")
            return httpx.Response(302, headers={"location": "/login"})

        client = HttpClient(base_url="https://example.com/api", transport=httpx.MockTransport(handler))
        response = await client.get("/v1/extras")
        await client.aclose()
        assert response.status_code == 200
        assert response.url.path == "/login"

    async def test_default_headers_are_copied(self):
        headers = {"User-Agent": "test-agent"}
        mock_client = AsyncMock()
        mock_client.request.return_value = httpx.Response(200)
        client = HttpClient(base_url="https://example.com", client=mock_client, headers=headers)

        headers["User-Agent"] = "changed"
        await client.get("/path")

        assert mock_client.request.call_args.kwargs["headers"] == {"User-Agent": "test-agent"}
        assert not hasattr(client, "headers")
