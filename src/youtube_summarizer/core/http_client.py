"""HTTP transports used by the transcript pipeline."""

import asyncio
import functools
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import aiohttp
import requests

from .config import config
from .exceptions import HttpRequestError
from ..utils.logging import get_logger

logger = get_logger("http_client")


def default_headers() -> Dict[str, str]:
    """Browser-like headers accepted by the watch page and player endpoint."""
    return {
        "User-Agent": config.network.user_agent,
        "Accept-Language": config.network.accept_language,
        "Origin": config.youtube.base_url,
        "Referer": f"{config.youtube.base_url}/",
    }


# Skips the EU cookie consent interstitial, which carries no player config.
CONSENT_COOKIES = {"CONSENT": "YES+1", "PREF": "hl=en"}


class HttpClient(ABC):
    """
    Minimal HTTP capability required by the pipeline.

    Implementations return the response body as text and raise
    `HttpRequestError` on transport failures and non-2xx responses.
    """

    @abstractmethod
    async def get(self, url: str) -> str:
        """Fetch *url* and return the body text."""

    @abstractmethod
    async def post(
        self,
        url: str,
        *,
        params: Optional[Dict[str, str]] = None,
        json: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> str:
        """POST a JSON body to *url* and return the body text."""

    async def close(self) -> None:
        """Release pooled connections."""

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()


class AiohttpClient(HttpClient):
    """Default transport backed by a pooled aiohttp session."""

    def __init__(self, session: Optional[aiohttp.ClientSession] = None):
        self._session = session
        self._owns_session = session is None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session."""
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(
                total=config.network.http_timeout_total,
                connect=config.network.http_timeout_connect
            )
            self._session = aiohttp.ClientSession(
                timeout=timeout,
                headers=default_headers(),
                cookies=CONSENT_COOKIES
            )
            self._owns_session = True
            logger.debug("Created new aiohttp session")
        return self._session

    async def _request(self, method: str, url: str, **kwargs) -> str:
        session = await self._get_session()
        try:
            async with session.request(method, url, **kwargs) as response:
                body = await response.text()
                if not 200 <= response.status < 300:
                    raise HttpRequestError(
                        f"{method} {url} returned HTTP {response.status}",
                        status=response.status,
                        url=url
                    )
                return body
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise HttpRequestError(f"{method} {url} failed: {e}", url=url) from e

    async def get(self, url: str) -> str:
        return await self._request("GET", url)

    async def post(
        self,
        url: str,
        *,
        params: Optional[Dict[str, str]] = None,
        json: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> str:
        return await self._request("POST", url, params=params, json=json, headers=headers)

    async def close(self) -> None:
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
            logger.debug("Closed aiohttp session")


class RequestsHttpClient(HttpClient):
    """Transport backed by a blocking requests session run in the default executor."""

    def __init__(self, session: Optional[requests.Session] = None):
        self.session = session or self._new_session()
        self._owns_session = session is None

    @staticmethod
    def _new_session() -> requests.Session:
        s = requests.Session()
        s.headers.update(default_headers())
        for name, value in CONSENT_COOKIES.items():
            s.cookies.set(name, value, domain=".youtube.com")
        return s

    def _request(self, method: str, url: str, **kwargs) -> str:
        timeout = (config.network.http_timeout_connect, config.network.http_timeout_total)
        try:
            response = self.session.request(method, url, timeout=timeout, **kwargs)
        except requests.RequestException as e:
            raise HttpRequestError(f"{method} {url} failed: {e}", url=url) from e
        if not 200 <= response.status_code < 300:
            raise HttpRequestError(
                f"{method} {url} returned HTTP {response.status_code}",
                status=response.status_code,
                url=url
            )
        return response.text

    async def _run(self, method: str, url: str, **kwargs) -> str:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, functools.partial(self._request, method, url, **kwargs))

    async def get(self, url: str) -> str:
        return await self._run("GET", url)

    async def post(
        self,
        url: str,
        *,
        params: Optional[Dict[str, str]] = None,
        json: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> str:
        return await self._run("POST", url, params=params, json=json, headers=headers)

    async def close(self) -> None:
        if self._owns_session:
            self.session.close()
            logger.debug("Closed requests session")
