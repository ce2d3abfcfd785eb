"""
Workflow: the bot's answer to an incoming call or a callback.
"""

import re
from typing import Any, Optional

from pydantic import Field

from skype_bot import validation as v
from skype_bot.models import limits
from skype_bot.models.actions import ActionBase, instantiate_action
from skype_bot.models.base import ModelBase, build
from skype_bot.models.enums import NotificationType
from skype_bot.models.sequence import validate_action_array

ABSOLUTE_URL_PATTERN = re.compile(r"^https?://", re.IGNORECASE)


class CallBackLink(ModelBase):
    """Where the calling service posts the results of a workflow."""

    call_back: Optional[str] = None

    def validate(self, context: Any = None) -> list[str]:
        errors = v.validate_string(context, self.call_back, "CallBackLink.callBack")
        if isinstance(self.call_back, str) and not ABSOLUTE_URL_PATTERN.match(self.call_back):
            errors.append(f"CallBackLink.callBack should be absolute URL but is {self.call_back}")
        return errors


class Workflow(ModelBase):
    links: Optional[CallBackLink] = None
    actions: Optional[list[ActionBase]] = None
    app_state: Optional[str] = None
    notification_subscriptions: Optional[list[NotificationType]] = Field(
        default_factory=lambda: [NotificationType.CALL_STATE_CHANGE]
    )
    additional_data: Optional[dict[str, Any]] = None

    @classmethod
    def nested_fields(cls):
        return {"links": build(CallBackLink), "actions": instantiate_action}

    @classmethod
    def for_callback(cls, callback_uri: str, **kwargs: Any) -> "Workflow":
        """Empty workflow whose results come back to ``callback_uri``."""
        return cls(links=CallBackLink(call_back=callback_uri), actions=[], **kwargs)

    def validate(self, context: Any = None) -> list[str]:
        errors = v.validate_optional_typed_object(context, self.links, CallBackLink, "Workflow.links", "CallBackLink")
        errors += v.validate_optional_string(context, self.app_state, "Workflow.appState", False, limits.APP_STATE_LENGTH.max)
        errors += v.validate_enum_array(
            context, self.notification_subscriptions, NotificationType, "Workflow.notificationSubscriptions"
        )
        subscriptions = self.notification_subscriptions
        if isinstance(subscriptions, list) and NotificationType.CALL_STATE_CHANGE not in subscriptions:
            errors.append(
                "Workflow.notificationSubscriptions does not contain subscription to "
                f"{NotificationType.CALL_STATE_CHANGE.value} notification as it should"
            )
        errors += v.validate_generic_object(context, self.additional_data, "Workflow.additionalData")
        errors += validate_action_array(context, self.actions, "Workflow.actions")
        return errors
