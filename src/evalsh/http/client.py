"""HTTP client exposed to the shell.

Uses aiohttp.ClientSession. Every status code comes back as an
HTTPResponse; only transport failures raise.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

import aiohttp

from evalsh.http.response import HTTPResponse, headers_from_items

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuration for HttpClient."""

    base_url: str

    # Timeouts (seconds)
    connect_timeout: float = 10.0
    read_timeout: float = 60.0

    headers: dict[str, str] = field(default_factory=lambda: {"Accept": "application/json"})


@dataclass
class HttpClient:
    """Verb helpers against a base URL.

    Relative URLs are joined to ``config.base_url``; absolute ones are used
    as given.

    Example:
        >>> async with HttpClient(HttpClientConfig("http://127.0.0.1:5984")) as http:
        ...     resp = await http.get("/_all_dbs")
        ...     resp.json()
    """

    config: HttpClientConfig
    _session: aiohttp.ClientSession | None = None

    async def connect(self) -> None:
        """Create the underlying session."""
        if self._session is not None:
            return
        timeout = aiohttp.ClientTimeout(
            connect=self.config.connect_timeout,
            total=self.config.read_timeout,
        )
        self._session = aiohttp.ClientSession(headers=self.config.headers, timeout=timeout)

    async def close(self) -> None:
        """Close the underlying session."""
        if self._session:
            await self._session.close()
            self._session = None

    @property
    def connected(self) -> bool:
        return self._session is not None

    async def __aenter__(self) -> HttpClient:
        await self.connect()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def url_for(self, url: str) -> str:
        """Resolve a possibly relative URL against the base URL."""
        if url.startswith(("http://", "https://")):
            return url
        return f"{self.config.base_url.rstrip('/')}/{url.lstrip('/')}"

    async def request(
        self,
        method: str,
        url: str,
        *,
        body: str | bytes | None = None,
        payload: Any = None,
        headers: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
    ) -> HTTPResponse:
        """Send a request and collect the full response.

        Args:
            method: HTTP method, any case.
            url: Absolute URL or path relative to the base URL.
            body: Raw request body.
            payload: Object to send as a JSON body (takes precedence over body).
            headers: Extra request headers.
            params: Query string parameters.

        Raises:
            RuntimeError: If connect() was not called.
            aiohttp.ClientError: On transport failures.
        """
        if self._session is None:
            raise RuntimeError("Client not connected. Call connect() first.")

        method = method.upper()
        target = self.url_for(url)
        request_headers = dict(headers or {})
        if payload is not None:
            body = json.dumps(payload)
            request_headers.setdefault("Content-Type", "application/json")

        async with self._session.request(
            method,
            target,
            data=body,
            headers=request_headers,
            params=params,
        ) as response:
            text = await response.text()
            result = HTTPResponse(
                status=response.status,
                headers=headers_from_items(response.headers.items()),
                body=text,
                reason=response.reason or "",
            )

        logger.debug("%s %s -> %d", method, target, result.status)
        return result

    async def get(self, url: str, **kwargs: Any) -> HTTPResponse:
        return await self.request("GET", url, **kwargs)

    async def head(self, url: str, **kwargs: Any) -> HTTPResponse:
        return await self.request("HEAD", url, **kwargs)

    async def put(self, url: str, **kwargs: Any) -> HTTPResponse:
        return await self.request("PUT", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> HTTPResponse:
        return await self.request("POST", url, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> HTTPResponse:
        return await self.request("DELETE", url, **kwargs)

    async def copy(self, url: str, destination: str | None = None, **kwargs: Any) -> HTTPResponse:
        """COPY a resource; destination becomes the Destination header."""
        return await self.request("COPY", url, **_with_destination(destination, kwargs))

    async def move(self, url: str, destination: str | None = None, **kwargs: Any) -> HTTPResponse:
        """MOVE a resource; destination becomes the Destination header."""
        return await self.request("MOVE", url, **_with_destination(destination, kwargs))


def _with_destination(destination: str | None, kwargs: dict[str, Any]) -> dict[str, Any]:
    if destination is None:
        return kwargs
    headers = dict(kwargs.get("headers") or {})
    headers["Destination"] = destination
    return {**kwargs, "headers": headers}
