"""Unit tests for the HTTP transports."""

from unittest.mock import AsyncMock, MagicMock

import pytest
import requests

from youtube_summarizer.core.exceptions import HttpRequestError
from youtube_summarizer.core.http_client import (
    CONSENT_COOKIES,
    AiohttpClient,
    RequestsHttpClient,
    default_headers
)


def _response(status_code=200, text="ok"):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    return response


class TestRequestsHttpClient:
    """Tests for the requests based transport."""

    def test_new_session_sets_headers_and_consent_cookie(self):
        client = RequestsHttpClient()

        assert client.session.headers["User-Agent"] == default_headers()["User-Agent"]
        assert client.session.cookies.get("CONSENT", domain=".youtube.com") == CONSENT_COOKIES["CONSENT"]

    @pytest.mark.asyncio
    async def test_get_returns_body(self):
        # Arrange
        session = MagicMock()
        session.request.return_value = _response(text="<html></html>")
        client = RequestsHttpClient(session)

        # Act
        body = await client.get("https://www.youtube.com/watch?v=dQw4w9WgXcQ")

        # Assert
        assert body == "<html></html>"
        method, url = session.request.call_args.args
        assert method == "GET"
        assert url == "https://www.youtube.com/watch?v=dQw4w9WgXcQ"

    @pytest.mark.asyncio
    async def test_post_passes_params_and_json(self):
        session = MagicMock()
        session.request.return_value = _response(text="{}")
        client = RequestsHttpClient(session)

        await client.post("https://example.test/p", params={"key": "k"}, json={"a": 1}, headers={"X": "1"})

        kwargs = session.request.call_args.kwargs
        assert kwargs["params"] == {"key": "k"}
        assert kwargs["json"] == {"a": 1}
        assert kwargs["headers"] == {"X": "1"}

    @pytest.mark.asyncio
    async def test_non_2xx_raises(self):
        session = MagicMock()
        session.request.return_value = _response(status_code=429)
        client = RequestsHttpClient(session)

        with pytest.raises(HttpRequestError) as exc_info:
            await client.get("https://example.test/")

        assert exc_info.value.status == 429

    @pytest.mark.asyncio
    async def test_connection_error_raises(self):
        session = MagicMock()
        session.request.side_effect = requests.ConnectionError("refused")
        client = RequestsHttpClient(session)

        with pytest.raises(HttpRequestError) as exc_info:
            await client.get("https://example.test/")

        assert exc_info.value.status == 0
        assert "refused" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_context_manager_closes_own_session(self):
        client = RequestsHttpClient()
        client.session = MagicMock()

        async with client:
            pass

        client.session.close.assert_called_once()

    @pytest.mark.asyncio
    async def test_does_not_close_borrowed_session(self):
        session = MagicMock()

        async with RequestsHttpClient(session):
            pass

        session.close.assert_not_called()


class TestAiohttpClient:
    """Tests for the aiohttp transport session handling."""

    @pytest.mark.asyncio
    async def test_creates_and_closes_own_session(self):
        client = AiohttpClient()

        session = await client._get_session()
        assert not session.closed

        await client.close()
        assert session.closed

    @pytest.mark.asyncio
    async def test_does_not_close_borrowed_session(self):
        session = MagicMock()
        session.closed = False
        client = AiohttpClient(session)

        await client.close()

        session.close.assert_not_called()

    @pytest.mark.asyncio
    async def test_non_2xx_raises(self):
        # Arrange
        response = MagicMock()
        response.status = 404
        response.text = AsyncMock(return_value="not found")
        session = MagicMock()
        session.closed = False
        session.request.return_value.__aenter__.return_value = response
        client = AiohttpClient(session)

        # Act
        with pytest.raises(HttpRequestError) as exc_info:
            await client.get("https://example.test/missing")

        # Assert
        assert session.request.call_args.args == ("GET", "https://example.test/missing")
        assert exc_info.value.status == 404

