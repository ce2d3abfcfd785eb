"""
Call descriptions exchanged with the calling service.
"""

from typing import Any, Optional

from skype_bot import validation as v
from skype_bot.models import limits
from skype_bot.models.base import ModelBase, build
from skype_bot.models.enums import CallState, ModalityType
from skype_bot.models.outcomes import OperationOutcomeBase, instantiate_operation_outcome
from skype_bot.models.participant import Participant


class ConversationBase(ModelBase):
    id: Optional[str] = None
    app_id: Optional[str] = None
    app_state: Optional[str] = None
    links: Optional[dict[str, str]] = None

    def validate(self, context: Any = None) -> list[str]:
        errors = v.validate_string(context, self.id, "ConversationBase.id")
        errors += v.validate_optional_string(
            context, self.app_state, "ConversationBase.appState", True, limits.APP_STATE_LENGTH.max
        )
        errors += v.validate_optional_string(context, self.app_id, "ConversationBase.appId")
        errors += v.validate_dictionary_of_strings(context, self.links, "ConversationBase.links")
        return errors


class Conversation(ConversationBase):
    """An incoming call as offered to the bot."""

    participants: Optional[list[Participant]] = None
    is_multi_party: Optional[bool] = False
    thread_id: Optional[str] = None
    presented_modality_types: Optional[list[ModalityType]] = None
    call_state: Optional[CallState] = None
    subject: Optional[str] = None
    additional_data: Optional[dict[str, Any]] = None

    @classmethod
    def nested_fields(cls):
        return {"participants": build(Participant)}

    def validate(self, context: Any = None) -> list[str]:
        errors = super().validate(context)

        if self.is_multi_party:
            errors += v.validate_string(context, self.thread_id, "Conversation.threadId")
        elif self.thread_id is not None:
            errors.append("Conversation.threadId must be null when Conversation.isMultiParty is not set")

        errors += v.validate_enum(context, self.call_state, CallState, "Conversation.callState")
        errors += v.validate_typed_object_array(
            context, self.participants, Participant, "Conversation.participants", "Participant"
        )
        errors += v.validate_enum_array(
            context, self.presented_modality_types, ModalityType, "Conversation.presentedModalityTypes"
        )
        errors += v.validate_boolean(context, self.is_multi_party, "Conversation.isMultiParty")
        errors += v.validate_optional_string(context, self.subject, "Conversation.subject")
        errors += v.validate_generic_object(context, self.additional_data, "Conversation.additionalData")
        return errors


class ConversationResult(ConversationBase):
    """Outcome of the last action of a workflow, posted to the callback link."""

    operation_outcome: Optional[OperationOutcomeBase] = None
    call_state: Optional[CallState] = CallState.IDLE

    @classmethod
    def nested_fields(cls):
        return {"operation_outcome": instantiate_operation_outcome}

    def validate(self, context: Any = None) -> list[str]:
        errors = super().validate(context)
        errors += v.validate_enum(context, self.call_state, CallState, "ConversationResult.callState")
        errors += v.validate_typed_object(
            context,
            self.operation_outcome,
            OperationOutcomeBase,
            "ConversationResult.operationOutcome",
            "OperationOutcomeBase",
        )
        return errors
