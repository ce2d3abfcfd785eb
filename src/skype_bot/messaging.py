"""
AsyncMessagingClient / MessagingClient: outbound messaging service API v2.

Every payload is validated before any token is requested or any request is
sent; invalid input raises ``ModelValidationError``.
"""

import asyncio
import base64
import json
import logging
from typing import Any, Optional

import httpx

from skype_bot.auth import ClientCredentialsTokenProvider, TokenProvider
from skype_bot.config import BotConfig
from skype_bot.errors import ModelValidationError, TransportError
from skype_bot.models import limits
from skype_bot.models.activity import Activity, Message
from skype_bot.models.attachment import Attachment, AttachmentInfo, AttachmentResponse
from skype_bot.models.enums import AttachmentType, AttachmentViewType
from skype_bot.transport.http import HttpClient

logger = logging.getLogger(__name__)

ACTIVITIES_PATH = "/v2/conversations/{}/activities"
CONVERSATION_ATTACHMENTS_PATH = "/v2/conversations/{}/attachments"
ATTACHMENT_PATH = "/v2/attachments/{}"
ATTACHMENT_VIEW_PATH = "/v2/attachments/{}/views/{}"


def _encode(content: Optional[bytes]) -> Optional[str]:
    return None if content is None else base64.b64encode(content).decode("ascii")


class AsyncMessagingClient:
    """Async messaging client (primary)."""

    def __init__(
        self,
        server_url: str,
        token_provider: TokenProvider,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._token_provider = token_provider
        self.http = HttpClient(server_url, token_provider=token_provider, timeout=timeout, transport=transport)

    @classmethod
    def from_config(cls, config: BotConfig, **kwargs: Any) -> "AsyncMessagingClient":
        config.require("server_url", "app_id", "app_secret")
        provider = ClientCredentialsTokenProvider(
            config.app_id,  # type: ignore[arg-type]
            config.app_secret,  # type: ignore[arg-type]
            oauth_url=config.oauth_url,
            scope=config.oauth_scope,
        )
        return cls(config.server_url, provider, timeout=config.request_timeout, **kwargs)  # type: ignore[arg-type]

    async def send_message(self, to: str, content: str) -> None:
        """Send a text message to a user or a group chat."""
        logger.debug("Sending message to %s", to)
        activity = Activity.model_construct(message=Message.model_construct(content=content))
        errors = activity.validate()
        if errors:
            raise ModelValidationError("message validation has failed", errors)
        await self.http.post(ACTIVITIES_PATH.format(to), activity.to_dict())

    async def post_attachment(
        self,
        to: str,
        name: Optional[str],
        type: AttachmentType,
        content: bytes,
        thumbnail: Optional[bytes] = None,
    ) -> AttachmentResponse:
        """Upload an image or video to a user or a group chat."""
        logger.debug("Posting attachment to %s", to)
        attachment = Attachment.model_construct(
            name=name,
            type=type,
            original_base64=_encode(content),
            thumbnail_base64=_encode(thumbnail),
        )
        errors = attachment.validate()
        if errors:
            raise ModelValidationError("attachment validation has failed", errors)

        body = json.dumps(attachment.to_dict(), separators=(",", ":"))
        if len(body) > limits.ATTACHMENT_REQUEST_SIZE_BYTES.max:
            raise ModelValidationError(
                "attachment validation has failed",
                [f"Serialized content size {len(body)} exceeds maximum allowed limit"],
            )
        data = await self.http.post_raw(CONVERSATION_ATTACHMENTS_PATH.format(to), body)
        return AttachmentResponse.populate(data)

    async def get_attachment_info(self, attachment_id: str) -> AttachmentInfo:
        if not attachment_id:
            raise ModelValidationError("attachment request is invalid", ["attachmentId is null"])
        data = await self.http.get(ATTACHMENT_PATH.format(attachment_id))
        if data is None:
            raise TransportError(f"Empty description received for attachment {attachment_id}")
        return AttachmentInfo.populate(data)

    async def get_attachment(self, attachment_id: str, view_id: AttachmentViewType) -> bytes:
        """Download one view (``original`` or ``thumbnail``) of an attachment."""
        errors = []
        if not attachment_id:
            errors.append("attachmentId is null")
        if view_id is None:
            errors.append("viewId is null")
        if errors:
            raise ModelValidationError("attachment request is invalid", errors)
        view = view_id.value if isinstance(view_id, AttachmentViewType) else view_id
        return await self.http.get_bytes(ATTACHMENT_VIEW_PATH.format(attachment_id, view))

    async def close(self) -> None:
        await self.http.close()
        close_provider = getattr(self._token_provider, "close", None)
        if close_provider is not None:
            await close_provider()

    async def __aenter__(self) -> "AsyncMessagingClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()


class MessagingClient:
    """Sync wrapper around AsyncMessagingClient. Runs the event loop internally."""

    def __init__(self, *args: Any, **kwargs: Any):
        self._loop = asyncio.new_event_loop()
        self._async = AsyncMessagingClient(*args, **kwargs)

    @classmethod
    def from_config(cls, config: BotConfig, **kwargs: Any) -> "MessagingClient":
        client = cls.__new__(cls)
        client._async = AsyncMessagingClient.from_config(config, **kwargs)
        client._loop = asyncio.new_event_loop()
        return client

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    def send_message(self, to: str, content: str) -> None:
        self._run(self._async.send_message(to, content))

    def post_attachment(
        self,
        to: str,
        name: Optional[str],
        type: AttachmentType,
        content: bytes,
        thumbnail: Optional[bytes] = None,
    ) -> AttachmentResponse:
        return self._run(self._async.post_attachment(to, name, type, content, thumbnail))

    def get_attachment_info(self, attachment_id: str) -> AttachmentInfo:
        return self._run(self._async.get_attachment_info(attachment_id))

    def get_attachment(self, attachment_id: str, view_id: AttachmentViewType) -> bytes:
        return self._run(self._async.get_attachment(attachment_id, view_id))

    def close(self) -> None:
        self._run(self._async.close())
        self._loop.close()
