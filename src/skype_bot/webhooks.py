"""
Inbound messaging webhook processing.

A webhook delivery is a JSON array of activities. It is parsed and validated
as a whole; if that fails a single error event is returned. Otherwise every
activity is converted on its own, in order, and a failure converting one
activity becomes an error event in its place without stopping the rest.
"""

import json
import logging
import re
from typing import Any, Callable, Union

from skype_bot.errors import SkypeBotError, WebhookError
from skype_bot.models.activity import (
    ActivityIncomingBase,
    ContactRelationUpdate,
    ConversationUpdate,
    IncomingAttachment,
    IncomingMessage,
    WebhookMessage,
)
from skype_bot.models.enums import ContactRelationAction, IncomingActivityType
from skype_bot.models.events import (
    AttachmentEvent,
    ContactNotification,
    EventType,
    HistoryDisclosed,
    MessageEvent,
    TopicUpdated,
    UserAdded,
    UserRemoved,
    WebhookEvent,
)

logger = logging.getLogger(__name__)

GROUP_CHAT_PATTERN = re.compile(r"@thread\.skype")

RawPayload = Union[str, bytes, bytearray, list, dict, None]


def is_group_chat(activity: ActivityIncomingBase) -> bool:
    return isinstance(activity.to, str) and GROUP_CHAT_PATTERN.search(activity.to) is not None


def from_error(message: str, activity: Any = None, payload: Any = None) -> WebhookEvent:
    return WebhookEvent(EventType.ERROR, WebhookError(message, activity=activity, payload=payload))


def _dump(payload: Any) -> str:
    try:
        return json.dumps(payload, default=str)
    except (TypeError, ValueError):
        return repr(payload)


def process_request_data(bot_id: str, request_data: RawPayload) -> list[WebhookEvent]:
    """Classify one webhook delivery into typed events, preserving activity order."""
    if isinstance(request_data, (bytes, bytearray)):
        request_data = request_data.decode("utf-8", errors="replace")
    if isinstance(request_data, str):
        try:
            request_data = json.loads(request_data)
        except json.JSONDecodeError as e:
            logger.debug("Webhook body is not valid JSON: %s", e)
            return [from_error(f"Incoming webhooks request could not be parsed, error: {e}", payload=request_data)]

    try:
        message = WebhookMessage.populate(request_data)
    except SkypeBotError as e:
        logger.debug("Webhook body could not be parsed: %s", e)
        return [from_error(
            f"Incoming webhooks request could not be parsed, error: {e}, request: {_dump(request_data)}",
            payload=request_data,
        )]

    errors = message.validate()
    if errors:
        logger.debug("Webhook body is invalid: %s", _dump(request_data))
        for error in errors:
            logger.debug("\t%s", error)
        return [from_error(
            f"Incoming webhooks request was invalid, errors: {','.join(errors)}, request: {_dump(request_data)}",
            payload=request_data,
        )]

    events: list[WebhookEvent] = []
    for activity in message.activities or []:
        kind = _kind(activity)
        convert = _CONVERTERS.get(kind)
        if convert is None:
            events.append(from_error(f"activity type {kind} is unsupported", activity=kind))
            continue
        try:
            events += convert(bot_id, activity)
        except Exception as e:
            logger.warning("Failed to convert %s activity to an event: %s", kind, e)
            events.append(from_error(f"failed to convert {kind} to an event, error: {e}", activity=kind))
    return events


def _kind(activity: ActivityIncomingBase) -> str:
    tag = activity.activity
    return tag.value if isinstance(tag, IncomingActivityType) else str(tag)


def _convert_conversation_update(bot_id: str, activity: ConversationUpdate) -> list[WebhookEvent]:
    common = {"from_": activity.from_, "to": activity.to, "event_time": activity.time}
    events = []
    if activity.history_disclosed is not None:
        events.append(WebhookEvent(
            EventType.THREAD_HISTORY_DISCLOSED_UPDATE,
            HistoryDisclosed(history_disclosed=activity.history_disclosed, **common),
            activity.to,
        ))
    if activity.topic_name is not None:
        events.append(WebhookEvent(
            EventType.THREAD_TOPIC_UPDATED,
            TopicUpdated(topic=activity.topic_name, **common),
            activity.to,
        ))
    for member in activity.members_added or []:
        events.append(WebhookEvent(
            EventType.THREAD_BOT_ADDED if member == bot_id else EventType.THREAD_MEMBER_ADDED,
            UserAdded(targets=[member], **common),
            activity.to,
        ))
    for member in activity.members_removed or []:
        events.append(WebhookEvent(
            EventType.THREAD_BOT_REMOVED if member == bot_id else EventType.THREAD_MEMBER_REMOVED,
            UserRemoved(targets=[member], **common),
            activity.to,
        ))
    return events


def _convert_contact_relation_update(bot_id: str, activity: ContactRelationUpdate) -> list[WebhookEvent]:
    if activity.action == ContactRelationAction.ADD:
        event_type = EventType.CONTACT_ADDED
    elif activity.action == ContactRelationAction.REMOVE:
        event_type = EventType.CONTACT_REMOVED
    else:
        return []
    notification = ContactNotification(
        from_=activity.from_,
        to=activity.to,
        action=ContactRelationAction(activity.action).value,
        from_display_name=activity.from_display_name,
        event_time=activity.time,
    )
    return [WebhookEvent(event_type, notification, activity.from_)]


def _convert_message(bot_id: str, activity: IncomingMessage) -> list[WebhookEvent]:
    message = MessageEvent(
        from_=activity.from_,
        to=activity.to,
        content=activity.content,
        message_id=activity.id,
        event_time=activity.time,
    )
    return [WebhookEvent(EventType.MESSAGE, message, None)]


def _convert_attachment(bot_id: str, activity: IncomingAttachment) -> list[WebhookEvent]:
    attachment = AttachmentEvent(
        from_=activity.from_,
        to=activity.to,
        id=activity.id,
        attachment_type=activity.type,
        attachment_name=activity.name,
        views=activity.views,
        event_time=activity.time,
    )
    reply_to = activity.to if is_group_chat(activity) else activity.from_
    return [WebhookEvent(EventType.ATTACHMENT, attachment, reply_to)]


_CONVERTERS: dict[str, Callable[[str, Any], list[WebhookEvent]]] = {
    IncomingActivityType.CONVERSATION_UPDATE.value: _convert_conversation_update,
    IncomingActivityType.CONTACT_RELATION_UPDATE.value: _convert_contact_relation_update,
    IncomingActivityType.MESSAGE.value: _convert_message,
    IncomingActivityType.ATTACHMENT.value: _convert_attachment,
}
