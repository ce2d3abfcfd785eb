"""
skype-bot-sdk: Skype bot SDK for Python.

Typed, validated models for the messaging and calling services, webhook
event classification and an async REST client for outbound messages.
"""

from skype_bot.auth import ClientCredentialsTokenProvider, StaticTokenProvider, TokenProvider
from skype_bot.calling import CallingService
from skype_bot.config import BotConfig, load_config, save_config
from skype_bot.errors import (
    AuthError,
    CallingError,
    ConfigError,
    ModelConstructionError,
    ModelValidationError,
    SkypeBotError,
    TransportError,
    UnsupportedTypeError,
    WebhookError,
)
from skype_bot.messaging import AsyncMessagingClient, MessagingClient
from skype_bot.models.events import EventType, WebhookEvent
from skype_bot.webhooks import process_request_data

__version__ = "0.1.0"
__all__ = [
    "AsyncMessagingClient",
    "MessagingClient",
    "CallingService",
    "process_request_data",
    "EventType",
    "WebhookEvent",
    "BotConfig",
    "load_config",
    "save_config",
    "TokenProvider",
    "StaticTokenProvider",
    "ClientCredentialsTokenProvider",
    "SkypeBotError",
    "ModelConstructionError",
    "UnsupportedTypeError",
    "ModelValidationError",
    "WebhookError",
    "CallingError",
    "AuthError",
    "TransportError",
    "ConfigError",
]
