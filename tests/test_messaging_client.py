"""Messaging client and token providers against a mocked HTTP transport."""

import base64
import json

import httpx
import pytest

from skype_bot import (
    AsyncMessagingClient,
    AuthError,
    BotConfig,
    ClientCredentialsTokenProvider,
    ConfigError,
    MessagingClient,
    ModelValidationError,
    StaticTokenProvider,
    TransportError,
)
from skype_bot.models import AttachmentResponse
from skype_bot.models.enums import AttachmentType, AttachmentViewType

SERVER = "https://apis.skype.example.com"


class Recorder:
    """MockTransport handler that records requests and replies with canned responses."""

    def __init__(self, *responses):
        self.requests = []
        self.responses = list(responses)

    def __call__(self, request):
        self.requests.append(request)
        if self.responses:
            return self.responses.pop(0)
        return httpx.Response(201)


class CountingTokenProvider(StaticTokenProvider):
    def __init__(self, token):
        super().__init__(token)
        self.calls = 0

    async def get_token(self):
        self.calls += 1
        return await super().get_token()


def _client(recorder, provider=None):
    return AsyncMessagingClient(
        SERVER, provider or StaticTokenProvider("tok"), transport=httpx.MockTransport(recorder)
    )


class TestSendMessage:
    @pytest.mark.asyncio
    async def test_posts_activity(self):
        recorder = Recorder()
        async with _client(recorder) as client:
            await client.send_message("8:alice", "hello")

        request = recorder.requests[0]
        assert request.method == "POST"
        assert request.url.path == "/v2/conversations/8:alice/activities"
        assert request.headers["Authorization"] == "Bearer tok"
        assert json.loads(request.content) == {"message": {"content": "hello"}}

    @pytest.mark.asyncio
    async def test_invalid_message_is_never_sent(self):
        recorder = Recorder()
        provider = CountingTokenProvider("tok")
        client = _client(recorder, provider)
        with pytest.raises(ModelValidationError) as exc:
            await client.send_message("8:alice", "   ")
        assert exc.value.errors == ["Message.content must not be empty or whitespaces only"]
        assert recorder.requests == []
        assert provider.calls == 0
        await client.close()

    @pytest.mark.asyncio
    async def test_server_error(self):
        recorder = Recorder(httpx.Response(500, text="oops"))
        client = _client(recorder)
        with pytest.raises(TransportError) as exc:
            await client.send_message("8:alice", "hello")
        assert exc.value.status_code == 500
        await client.close()


class TestAttachments:
    @pytest.mark.asyncio
    async def test_post_attachment(self):
        recorder = Recorder(httpx.Response(201, json={"attachmentId": "att-1", "activityId": "act-1"}))
        client = _client(recorder)
        response = await client.post_attachment("8:alice", "cat.png", AttachmentType.IMAGE, b"\x89PNG")
        await client.close()

        assert isinstance(response, AttachmentResponse)
        assert response.attachment_id == "att-1"
        request = recorder.requests[0]
        assert request.url.path == "/v2/conversations/8:alice/attachments"
        assert request.headers["Content-Type"] == "application/json"
        body = json.loads(request.content)
        assert body == {
            "originalBase64": base64.b64encode(b"\x89PNG").decode("ascii"),
            "type": "Image",
            "name": "cat.png",
        }

    @pytest.mark.asyncio
    async def test_get_attachment_info(self):
        info = {"type": "Image", "name": "cat.png", "views": [{"viewId": "original", "size": 4}]}
        recorder = Recorder(httpx.Response(200, json=info))
        client = _client(recorder)
        result = await client.get_attachment_info("att-1")
        await client.close()

        assert recorder.requests[0].url.path == "/v2/attachments/att-1"
        assert result.name == "cat.png"
        assert result.validate() == []

    @pytest.mark.asyncio
    async def test_get_attachment_view(self):
        recorder = Recorder(httpx.Response(200, content=b"\x89PNG"))
        client = _client(recorder)
        content = await client.get_attachment("att-1", AttachmentViewType.THUMBNAIL)
        await client.close()

        assert content == b"\x89PNG"
        assert recorder.requests[0].url.path == "/v2/attachments/att-1/views/thumbnail"

    @pytest.mark.asyncio
    async def test_attachment_request_checks(self):
        client = _client(Recorder())
        with pytest.raises(ModelValidationError) as exc:
            await client.get_attachment("", None)
        assert exc.value.errors == ["attachmentId is null", "viewId is null"]
        await client.close()


class TestTokenProvider:
    def _provider(self, recorder, clock):
        return ClientCredentialsTokenProvider(
            "app-1", "secret", transport=httpx.MockTransport(recorder), clock=lambda: clock[0]
        )

    @pytest.mark.asyncio
    async def test_token_is_cached_until_renewal_window(self):
        clock = [1000.0]
        recorder = Recorder(
            httpx.Response(200, json={"access_token": "t1", "expires_in": 3600}),
            httpx.Response(200, json={"access_token": "t2", "expires_in": 3600}),
        )
        provider = self._provider(recorder, clock)

        assert await provider.get_token() == "t1"
        clock[0] += 2000
        assert await provider.get_token() == "t1"
        assert len(recorder.requests) == 1

        # renewal starts 600 s before expiry
        clock[0] += 1000
        assert await provider.get_token() == "t2"
        assert len(recorder.requests) == 2
        await provider.close()

    @pytest.mark.asyncio
    async def test_request_form(self):
        recorder = Recorder(httpx.Response(200, json={"access_token": "t1", "expires_in": 3600}))
        provider = self._provider(recorder, [0.0])
        await provider.get_token()
        await provider.close()

        form = dict(httpx.QueryParams(recorder.requests[0].content.decode()))
        assert form["grant_type"] == "client_credentials"
        assert form["client_id"] == "app-1"
        assert form["client_secret"] == "secret"

    @pytest.mark.asyncio
    async def test_rejected(self):
        provider = self._provider(Recorder(httpx.Response(401)), [0.0])
        with pytest.raises(AuthError) as exc:
            await provider.get_token()
        assert exc.value.code == "token_rejected"
        await provider.close()

    @pytest.mark.asyncio
    async def test_malformed(self):
        provider = self._provider(Recorder(httpx.Response(200, json={"token": "t1"})), [0.0])
        with pytest.raises(AuthError) as exc:
            await provider.get_token()
        assert exc.value.code == "token_malformed"
        await provider.close()


class TestSyncClient:
    def test_send_message(self):
        recorder = Recorder()
        client = MessagingClient(SERVER, StaticTokenProvider("tok"), transport=httpx.MockTransport(recorder))
        try:
            client.send_message("19:abc@thread.skype", "hello group")
        finally:
            client.close()
        assert json.loads(recorder.requests[0].content) == {"message": {"content": "hello group"}}

    def test_from_config_needs_credentials(self):
        with pytest.raises(ConfigError) as exc:
            MessagingClient.from_config(BotConfig(server_url=SERVER))
        assert exc.value.message == "Missing configuration option(s): app_id, app_secret"
