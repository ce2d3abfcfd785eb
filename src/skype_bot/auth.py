"""
Access tokens for outbound calls to the messaging service.

OAuth client-credentials flow against the Microsoft identity platform. The
token is cached and renewed a while before it expires; concurrent callers
share a single renewal.
"""

import asyncio
import logging
import time
from typing import Callable, Optional, Protocol

import httpx

from skype_bot.errors import AuthError

logger = logging.getLogger(__name__)

DEFAULT_OAUTH_URL = "https://login.microsoftonline.com/common/oauth2/v2.0/token"
DEFAULT_SCOPE = "https://graph.microsoft.com/.default"
DEFAULT_RENEW_BEFORE_EXPIRATION = 600


class TokenProvider(Protocol):
    async def get_token(self) -> str: ...


class StaticTokenProvider:
    """Always hands out the same token. Useful for tests and short scripts."""

    def __init__(self, token: str):
        self._token = token

    async def get_token(self) -> str:
        return self._token


class ClientCredentialsTokenProvider:
    def __init__(
        self,
        app_id: str,
        app_secret: str,
        oauth_url: str = DEFAULT_OAUTH_URL,
        scope: str = DEFAULT_SCOPE,
        renew_before_expiration: int = DEFAULT_RENEW_BEFORE_EXPIRATION,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._app_id = app_id.strip()
        self._app_secret = app_secret.strip()
        self._oauth_url = oauth_url
        self._scope = scope
        self._renew_before_expiration = renew_before_expiration
        self._clock = clock
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)
        self._lock = asyncio.Lock()

        self._token: Optional[str] = None
        self._valid_until = 0.0

    def _is_valid(self) -> bool:
        return self._token is not None and self._clock() < self._valid_until

    async def get_token(self) -> str:
        if self._is_valid():
            return self._token  # type: ignore[return-value]
        async with self._lock:
            # another caller may have renewed it while we waited
            if not self._is_valid():
                await self._renew_token()
            return self._token  # type: ignore[return-value]

    async def _renew_token(self) -> None:
        logger.debug("Requesting access token for app %s", self._app_id)
        form = {
            "client_id": self._app_id,
            "client_secret": self._app_secret,
            "grant_type": "client_credentials",
            "scope": self._scope,
        }
        try:
            resp = await self._client.post(self._oauth_url, data=form)
        except httpx.HTTPError as e:
            raise AuthError(f"Failed to request access token: {e}")
        if resp.status_code != 200:
            raise AuthError(f"Received error {resp.status_code}: {resp.reason_phrase}.", code="token_rejected")

        try:
            payload = resp.json()
            token = payload["access_token"]
            expires_in = float(payload["expires_in"])
        except (ValueError, KeyError, TypeError) as e:
            raise AuthError(f"Malformed token response: {e}", code="token_malformed")

        self._token = token
        self._valid_until = self._clock() + expires_in - self._renew_before_expiration
        logger.debug("Access token renewed, valid for %.0f s", expires_in - self._renew_before_expiration)

    async def close(self) -> None:
        await self._client.aclose()
