"""
Calling service dispatch.

Turns the calling service's callbacks into handler calls and validates what
the handlers answer with. Handlers receive a fresh workflow (or notification
response), fill it in and return it; returning ``None`` means there is nothing
to send back.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional, Union

from skype_bot.errors import CallingError, SkypeBotError
from skype_bot.models.conversation import Conversation, ConversationResult
from skype_bot.models.enums import MultipartField, NotificationType, OutcomeType
from skype_bot.models.notifications import NotificationResponse, instantiate_notification
from skype_bot.models.workflow import Workflow

logger = logging.getLogger(__name__)

IncomingCallHandler = Callable[[Conversation, Workflow], Optional[Workflow]]
OutcomeHandler = Callable[..., Optional[Workflow]]
NotificationHandler = Callable[[Any, NotificationResponse], Optional[NotificationResponse]]

CallbackReply = Union[Workflow, NotificationResponse, None]


def _parse(content: Any) -> Any:
    if isinstance(content, (bytes, bytearray)):
        try:
            content = content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise CallingError(f"Callback content is not UTF-8 text: {e}", code="invalid_content")
    if isinstance(content, str):
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise CallingError(f"Callback content is not valid JSON: {e}", code="invalid_content")
    return content


def _log_invalid(what: str, content: Any, errors: list[str]) -> None:
    logger.debug("%s is invalid: %r", what, content)
    for error in errors:
        logger.debug("\t%s", error)


class CallingService:
    def __init__(self, callback_uri: str):
        self.callback_uri = callback_uri
        self._incoming_call_handler: Optional[IncomingCallHandler] = None
        self._notification_handlers: dict[str, NotificationHandler] = {}
        self._outcome_handlers: dict[str, OutcomeHandler] = {}

    def on_incoming_call(self, handler: IncomingCallHandler) -> IncomingCallHandler:
        self._incoming_call_handler = handler
        return handler

    def on_call_state_change(self, handler: NotificationHandler) -> NotificationHandler:
        self._notification_handlers[NotificationType.CALL_STATE_CHANGE.value] = handler
        return handler

    def on_roster_update(self, handler: NotificationHandler) -> NotificationHandler:
        self._notification_handlers[NotificationType.ROSTER_UPDATE.value] = handler
        return handler

    def on_outcome(self, outcome_type: OutcomeType, handler: OutcomeHandler) -> OutcomeHandler:
        """Register the handler for one outcome type.

        Handlers are called as ``handler(result, workflow)``; record outcome
        handlers as ``handler(result, recorded_audio, workflow)``.
        """
        self._outcome_handlers[OutcomeType(outcome_type).value] = handler
        return handler

    def create_workflow(self) -> Workflow:
        return Workflow.for_callback(self.callback_uri)

    def process_call(self, content: Any) -> Optional[Workflow]:
        """Handle an incoming call offer and return the workflow to answer with."""
        data = _parse(content)
        try:
            conversation = Conversation.populate(data)
        except SkypeBotError as e:
            raise CallingError(f"Received invalid conversation: {e}", code="invalid_conversation")
        errors = conversation.validate()
        if errors:
            _log_invalid("Received conversation", data, errors)
            raise CallingError("Received invalid conversation.", code="invalid_conversation", errors=errors)

        handler = self._require(self._incoming_call_handler, "incoming call")
        return self._checked_workflow(handler(conversation, self.create_workflow()))

    def process_callback(self, content: Any, additional_data: Optional[bytes] = None) -> CallbackReply:
        """Handle a conversation result or, failing that, a notification."""
        data = _parse(content)

        result: Optional[ConversationResult] = None
        errors: list[str] = []
        try:
            result = ConversationResult.populate(data)
            errors = result.validate()
        except SkypeBotError as e:
            errors = [str(e)]

        if result is None or errors:
            _log_invalid("Conversation result", data, errors)
            logger.debug("Trying to parse content as notification.")
            return self._process_notification(data)
        return self._process_conversation_result(result, additional_data)

    def process_multipart_callback(self, parts: Mapping[str, Any]) -> CallbackReply:
        """Handle a callback already split into its multipart fields.

        The conversation result travels in ``conversationResult`` and, for
        record outcomes, the audio in ``recordedAudio``.
        """
        content = parts.get(MultipartField.CONVERSATION_RESULT.value)
        if content is None:
            raise CallingError(
                f"Multipart callback has no {MultipartField.CONVERSATION_RESULT.value} field", code="invalid_content"
            )
        return self.process_callback(content, parts.get(MultipartField.RECORDED_AUDIO.value))

    def _process_conversation_result(
        self, result: ConversationResult, additional_data: Optional[bytes]
    ) -> Optional[Workflow]:
        outcome_type = result.operation_outcome.type  # type: ignore[union-attr]
        outcome_type = OutcomeType(outcome_type).value
        handler = self._require(self._outcome_handlers.get(outcome_type), outcome_type)

        workflow = self.create_workflow()
        if outcome_type == OutcomeType.RECORD_OUTCOME.value:
            reply = handler(result, additional_data, workflow)
        else:
            reply = handler(result, workflow)
        return self._checked_workflow(reply)

    def _process_notification(self, data: Any) -> Optional[NotificationResponse]:
        try:
            notification = instantiate_notification(data)
        except SkypeBotError as e:
            raise CallingError(f"Callback content not recognized: {e}", code="unrecognized_callback")

        errors = notification.validate()
        if errors:
            _log_invalid("Notification", data, errors)
            raise CallingError("Invalid notification.", code="invalid_notification", errors=errors)

        tag = NotificationType(notification.notification_type).value
        handler = self._require(self._notification_handlers.get(tag), tag)
        response = handler(notification, NotificationResponse())
        if response is None:
            return None
        errors = response.validate()
        if errors:
            _log_invalid("Notification response", response, errors)
            raise CallingError(
                "Received invalid notification response.", code="invalid_notification_response", errors=errors
            )
        return response

    def _checked_workflow(self, workflow: Optional[Workflow]) -> Optional[Workflow]:
        if workflow is None:
            return None
        errors = workflow.validate()
        if errors:
            _log_invalid("Workflow", workflow, errors)
            raise CallingError("Received invalid workflow.", code="invalid_workflow", errors=errors)
        return workflow

    @staticmethod
    def _require(handler: Optional[Callable[..., Any]], event: str) -> Callable[..., Any]:
        if handler is None:
            raise CallingError(f"No event handler found for {event}.", code="no_handler")
        return handler
