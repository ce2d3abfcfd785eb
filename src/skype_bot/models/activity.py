"""
Messaging activities: inbound webhook records and the outbound message activity.
"""

import re
from typing import Any, Optional

from pydantic import Field

from skype_bot import validation as v
from skype_bot.errors import ModelConstructionError, UnsupportedTypeError
from skype_bot.models import limits
from skype_bot.models.attachment import AttachmentViewInfo
from skype_bot.models.base import ModelBase, build, read_discriminant
from skype_bot.models.enums import AttachmentType, ContactRelationAction, IncomingActivityType

ISO8601_PATTERN = re.compile(
    r"([\+-]?\d{4}(?!\d{2}\b))((-?)((0[1-9]|1[0-2])(\3([12]\d|0[1-9]|3[01]))?|W([0-4]\d|5[0-2])(-?[1-7])?"
    r"|(00[1-9]|0[1-9]\d|[12]\d{2}|3([0-5]\d|6[1-6])))([T\s]((([01]\d|2[0-3])((:?)[0-5]\d)?|24:?00)"
    r"([\.,]\d+(?!:))?)?(\17[0-5]\d([\.,]\d+)?)?([zZ]|([\+-])([01]\d|2[0-3]):?([0-5]\d)?)?)?)?",
    re.ASCII,
)


def is_iso8601(value: str) -> bool:
    return ISO8601_PATTERN.fullmatch(value) is not None


class ActivityIncomingBase(ModelBase):
    activity: Optional[IncomingActivityType] = None
    from_: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None
    time: Optional[str] = None

    def validate(self, context: Any = None) -> list[str]:
        errors = v.validate_enum(context, self.activity, IncomingActivityType, "ActivityIncomingBase.activity")
        errors += v.validate_string(context, self.from_, "ActivityIncomingBase.from")
        errors += v.validate_string(context, self.to, "ActivityIncomingBase.to")
        errors += v.validate_string(context, self.time, "ActivityIncomingBase.time")
        if isinstance(self.time, str) and not is_iso8601(self.time):
            errors.append(
                f"ActivityIncomingBase.time value {self.time} is not a valid timestamp string according to ISO8601"
            )
        return errors


class IncomingMessage(ActivityIncomingBase):
    activity: Optional[IncomingActivityType] = IncomingActivityType.MESSAGE
    id: Optional[str] = None
    content: Optional[str] = None

    def validate(self, context: Any = None) -> list[str]:
        errors = super().validate(context)
        errors += self._tag_errors("IncomingMessage.activity", self.activity, IncomingActivityType.MESSAGE)
        errors += v.validate_string(context, self.id, "IncomingMessage.id")
        errors += v.validate_string(context, self.content, "IncomingMessage.content")
        return errors


class IncomingAttachment(ActivityIncomingBase):
    activity: Optional[IncomingActivityType] = IncomingActivityType.ATTACHMENT
    id: Optional[str] = None
    type: Optional[AttachmentType] = None
    name: Optional[str] = None
    views: Optional[list[AttachmentViewInfo]] = None

    @classmethod
    def nested_fields(cls):
        return {"views": build(AttachmentViewInfo)}

    def validate(self, context: Any = None) -> list[str]:
        errors = super().validate(context)
        errors += self._tag_errors("IncomingAttachment.activity", self.activity, IncomingActivityType.ATTACHMENT)
        errors += v.validate_string(context, self.id, "IncomingAttachment.id")
        errors += v.validate_enum(context, self.type, AttachmentType, "IncomingAttachment.type")
        errors += v.validate_optional_string(context, self.name, "IncomingAttachment.name")
        errors += v.validate_typed_object_array(
            context, self.views, AttachmentViewInfo, "IncomingAttachment.views", "AttachmentViewInfo"
        )
        return errors


class ContactRelationUpdate(ActivityIncomingBase):
    activity: Optional[IncomingActivityType] = IncomingActivityType.CONTACT_RELATION_UPDATE
    action: Optional[ContactRelationAction] = None
    from_display_name: Optional[str] = None

    def validate(self, context: Any = None) -> list[str]:
        errors = super().validate(context)
        errors += self._tag_errors(
            "ContactRelationUpdate.activity", self.activity, IncomingActivityType.CONTACT_RELATION_UPDATE
        )
        errors += v.validate_enum(context, self.action, ContactRelationAction, "ContactRelationUpdate.action")
        errors += v.validate_optional_string(context, self.from_display_name, "ContactRelationUpdate.fromDisplayName")
        return errors


class ConversationUpdate(ActivityIncomingBase):
    activity: Optional[IncomingActivityType] = IncomingActivityType.CONVERSATION_UPDATE
    members_added: Optional[list[str]] = None
    members_removed: Optional[list[str]] = None
    topic_name: Optional[str] = None
    history_disclosed: Optional[bool] = None

    def validate(self, context: Any = None) -> list[str]:
        errors = super().validate(context)
        errors += self._tag_errors(
            "ConversationUpdate.activity", self.activity, IncomingActivityType.CONVERSATION_UPDATE
        )
        errors += v.validate_optional_array_of_strings(context, self.members_added, "ConversationUpdate.membersAdded")
        errors += v.validate_optional_array_of_strings(
            context, self.members_removed, "ConversationUpdate.membersRemoved"
        )
        errors += v.validate_optional_string(context, self.topic_name, "ConversationUpdate.topicName")
        errors += v.validate_optional_boolean(context, self.history_disclosed, "ConversationUpdate.historyDisclosed")
        if all(
            value is None
            for value in (self.members_added, self.members_removed, self.topic_name, self.history_disclosed)
        ):
            errors.append("ConversationUpdate is invalid, no optional attribute is set")
        return errors


INCOMING_ACTIVITY_TYPES: dict[str, type[ActivityIncomingBase]] = {
    IncomingActivityType.ATTACHMENT.value: IncomingAttachment,
    IncomingActivityType.CONTACT_RELATION_UPDATE.value: ContactRelationUpdate,
    IncomingActivityType.CONVERSATION_UPDATE.value: ConversationUpdate,
    IncomingActivityType.MESSAGE.value: IncomingMessage,
}


def instantiate_incoming_activity(data: Any) -> ActivityIncomingBase:
    """Build the concrete activity named by ``data["activity"]``."""
    tag = read_discriminant(data, "activity", "activity")
    model = INCOMING_ACTIVITY_TYPES.get(tag) if isinstance(tag, str) else None
    if model is None:
        raise UnsupportedTypeError("activity", tag)
    return model.populate(data)


class WebhookMessage(ModelBase):
    """Body of one webhook delivery: a list of incoming activities."""

    activities: Optional[list[ActivityIncomingBase]] = None

    @classmethod
    def populate(cls, data: Any = None) -> "WebhookMessage":
        if data is None:
            return cls.model_construct()
        if isinstance(data, cls):
            return data
        if not isinstance(data, list):
            raise ModelConstructionError("the input data is not an array")
        return cls.model_construct(activities=[instantiate_incoming_activity(item) for item in data])

    def validate(self, context: Any = None) -> list[str]:
        return v.validate_typed_object_array(
            context, self.activities, ActivityIncomingBase, "WebhookMessage.activities", "ActivityIncomingBase"
        )


# Outbound

class Message(ModelBase):
    content: Optional[str] = None

    def validate(self, context: Any = None) -> list[str]:
        errors = v.validate_string(context, self.content, "Message.content")
        if isinstance(self.content, str):
            size = len(self.content.encode("utf-8"))
            if size > limits.MESSAGE_CONTENT_SIZE_BYTES.max:
                errors.append(
                    f"Message.content size {size} bytes is more than allowed maximum "
                    f"{limits.MESSAGE_CONTENT_SIZE_BYTES.max}"
                )
        return errors


class Activity(ModelBase):
    """POST /v2/conversations/{id}/activities body."""

    message: Optional[Message] = None

    @classmethod
    def nested_fields(cls):
        return {"message": build(Message)}

    def validate(self, context: Any = None) -> list[str]:
        return v.validate_typed_object(context, self.message, Message, "Activity.message", "Message")
