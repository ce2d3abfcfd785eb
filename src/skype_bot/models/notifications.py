"""
Notifications pushed by the calling service while a call is running.
"""

from typing import Any, ClassVar, Optional

from skype_bot import validation as v
from skype_bot.errors import UnsupportedTypeError
from skype_bot.models import limits
from skype_bot.models.base import ModelBase, build, read_discriminant
from skype_bot.models.conversation import ConversationBase
from skype_bot.models.enums import CallState, NotificationType
from skype_bot.models.participant import RosterParticipant
from skype_bot.models.workflow import CallBackLink


class NotificationBase(ConversationBase):
    TAG: ClassVar[Optional[NotificationType]] = None

    notification_type: Optional[NotificationType] = None

    def validate(self, context: Any = None) -> list[str]:
        errors = super().validate(context)
        errors += v.validate_enum(
            context, self.notification_type, NotificationType, "NotificationBase.notificationType"
        )
        if self.TAG is not None:
            errors += self._tag_errors(f"{type(self).__name__}.notificationType", self.notification_type, self.TAG)
        return errors


class CallStateChangeNotification(NotificationBase):
    TAG: ClassVar[Optional[NotificationType]] = NotificationType.CALL_STATE_CHANGE

    notification_type: Optional[NotificationType] = NotificationType.CALL_STATE_CHANGE
    current_state: Optional[CallState] = None

    def validate(self, context: Any = None) -> list[str]:
        errors = super().validate(context)
        errors += v.validate_enum(context, self.current_state, CallState, "CallStateChangeNotification.currentState")
        return errors


class RosterUpdateNotification(NotificationBase):
    TAG: ClassVar[Optional[NotificationType]] = NotificationType.ROSTER_UPDATE

    notification_type: Optional[NotificationType] = NotificationType.ROSTER_UPDATE
    participants: Optional[list[RosterParticipant]] = None

    @classmethod
    def nested_fields(cls):
        return {"participants": build(RosterParticipant)}

    def validate(self, context: Any = None) -> list[str]:
        errors = super().validate(context)
        errors += v.validate_typed_object_array(
            context, self.participants, RosterParticipant, "RosterUpdateNotification.participants", "RosterParticipant"
        )
        return errors


class NotificationResponse(ModelBase):
    """Optional reply to a notification, e.g. to move the callback link."""

    links: Optional[CallBackLink] = None
    app_state: Optional[str] = None
    additional_data: Optional[dict[str, Any]] = None

    @classmethod
    def nested_fields(cls):
        return {"links": build(CallBackLink)}

    def validate(self, context: Any = None) -> list[str]:
        errors = v.validate_optional_typed_object(
            context, self.links, CallBackLink, "NotificationResponse.links", "CallBackLink"
        )
        errors += v.validate_optional_string(
            context, self.app_state, "NotificationResponse.appState", True, limits.APP_STATE_LENGTH.max
        )
        errors += v.validate_generic_object(context, self.additional_data, "NotificationResponse.additionalData")
        return errors


NOTIFICATION_TYPES: dict[str, type[NotificationBase]] = {
    NotificationType.CALL_STATE_CHANGE.value: CallStateChangeNotification,
    NotificationType.ROSTER_UPDATE.value: RosterUpdateNotification,
}


def instantiate_notification(data: Any) -> NotificationBase:
    """Build the concrete notification named by ``data["notificationType"]``."""
    tag = read_discriminant(data, "notificationType", "notification")
    model = NOTIFICATION_TYPES.get(tag) if isinstance(tag, str) else None
    if model is None:
        raise UnsupportedTypeError("notification", tag)
    return model.populate(data)
