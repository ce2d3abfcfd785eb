"""
REST HTTP client for the messaging service.
"""

import logging
from typing import Any, Optional

import httpx

from skype_bot.auth import TokenProvider
from skype_bot.errors import TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15.0


class HttpClient:
    def __init__(
        self,
        base_url: str,
        token_provider: Optional[TokenProvider] = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url.strip().rstrip("/")
        self._token_provider = token_provider
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={"User-Agent": "skype-bot-sdk/0.1.0", "Accept": "application/json"},
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )

    async def _auth_headers(self, authenticated: bool) -> dict[str, str]:
        headers: dict[str, str] = {}
        if authenticated and self._token_provider is not None:
            headers["Authorization"] = f"Bearer {await self._token_provider.get_token()}"
        return headers

    async def _request(self, method: str, path: str, authenticated: bool, **kwargs: Any) -> httpx.Response:
        headers = await self._auth_headers(authenticated)
        headers.update(kwargs.pop("headers", {}))
        logger.debug("%s %s", method, path)
        try:
            resp = await self._client.request(method, path, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            raise TransportError(f"{method} {path} failed: {e}")
        if resp.status_code < 200 or resp.status_code >= 300:
            raise TransportError(
                f"Received unexpected response {resp.status_code} from Messaging Service: {resp.text[:200]}",
                status_code=resp.status_code,
            )
        return resp

    @staticmethod
    def _json(resp: httpx.Response) -> Any:
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            raise TransportError(f"Response is not valid JSON: {resp.text[:200]}", status_code=resp.status_code)

    async def get(self, path: str, authenticated: bool = True) -> Any:
        resp = await self._request("GET", path, authenticated)
        return self._json(resp)

    async def get_bytes(self, path: str, authenticated: bool = True) -> bytes:
        resp = await self._request("GET", path, authenticated, headers={"Accept": "*/*"})
        return resp.content

    async def post(self, path: str, body: Optional[dict[str, Any]] = None, authenticated: bool = True) -> Any:
        resp = await self._request("POST", path, authenticated, json=body)
        return self._json(resp)

    async def post_raw(self, path: str, content: str, authenticated: bool = True) -> Any:
        """POST an already serialized JSON body."""
        resp = await self._request(
            "POST", path, authenticated, content=content.encode("utf-8"), headers={"Content-Type": "application/json"}
        )
        return self._json(resp)

    async def close(self) -> None:
        await self._client.aclose()
