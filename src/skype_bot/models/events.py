"""
Typed events produced from inbound messaging webhooks.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from skype_bot.models.attachment import AttachmentViewInfo


class EventType(str, Enum):
    ERROR = "error"
    MESSAGE = "message"
    ATTACHMENT = "attachment"
    CONTACT_ADDED = "contactAdded"
    CONTACT_REMOVED = "contactRemoved"
    THREAD_BOT_ADDED = "threadBotAdded"
    THREAD_BOT_REMOVED = "threadBotRemoved"
    THREAD_MEMBER_ADDED = "threadAddMember"
    THREAD_MEMBER_REMOVED = "threadRemoveMember"
    THREAD_TOPIC_UPDATED = "threadTopicUpdated"
    THREAD_HISTORY_DISCLOSED_UPDATE = "threadHistoryDisclosedUpdate"


class Event(BaseModel):
    """Common sender/recipient part of every event payload."""

    from_: str = Field(alias="from")
    to: str
    event_time: str

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)


class MessageEvent(Event):
    content: str
    content_type: str = "text"
    message_id: str


class AttachmentEvent(Event):
    id: str
    attachment_type: str
    attachment_name: Optional[str] = None
    views: list[AttachmentViewInfo]


class ContactNotification(Event):
    action: str
    from_display_name: Optional[str] = None


class HistoryDisclosed(Event):
    history_disclosed: bool


class TopicUpdated(Event):
    topic: str


class UserAdded(Event):
    targets: list[str]


class UserRemoved(UserAdded):
    pass


class WebhookEvent:
    """One classified event: its type, payload and the conversation to reply to."""

    __slots__ = ("type", "event_object", "reply_to")

    def __init__(self, type: EventType, event_object: Any, reply_to: Optional[str] = None):
        self.type = type
        self.event_object = event_object
        self.reply_to = reply_to

    @property
    def is_error(self) -> bool:
        return self.type == EventType.ERROR

    def __repr__(self) -> str:
        return f"WebhookEvent(type={self.type.value!r}, reply_to={self.reply_to!r})"
