"""
Messaging and calling payload models.
"""

from skype_bot.models.actions import (
    ActionBase,
    Answer,
    AnswerAppHostedMedia,
    Hangup,
    PlaceCall,
    PlayPrompt,
    Recognize,
    Record,
    Reject,
    Transfer,
    VideoSubscription,
    instantiate_action,
)
from skype_bot.models.activity import (
    Activity,
    ActivityIncomingBase,
    ContactRelationUpdate,
    ConversationUpdate,
    IncomingAttachment,
    IncomingMessage,
    Message,
    WebhookMessage,
    instantiate_incoming_activity,
)
from skype_bot.models.attachment import Attachment, AttachmentInfo, AttachmentResponse, AttachmentViewInfo
from skype_bot.models.base import ModelBase
from skype_bot.models.conversation import Conversation, ConversationBase, ConversationResult
from skype_bot.models.events import EventType, WebhookEvent
from skype_bot.models.notifications import (
    CallStateChangeNotification,
    NotificationBase,
    NotificationResponse,
    RosterUpdateNotification,
    instantiate_notification,
)
from skype_bot.models.outcomes import (
    AnswerAppHostedMediaOutcome,
    AnswerOutcome,
    ChoiceOutcome,
    CollectDigitsOutcome,
    HangupOutcome,
    OperationOutcomeBase,
    PlaceCallOutcome,
    PlayPromptOutcome,
    RecognizeOutcome,
    RecordOutcome,
    RejectOutcome,
    TranscriptionOutcome,
    TransferOutcome,
    VideoSubscriptionOutcome,
    WorkflowValidationOutcome,
    instantiate_operation_outcome,
)
from skype_bot.models.participant import Participant, RosterParticipant
from skype_bot.models.prompt import Prompt
from skype_bot.models.recognition import CollectDigits, RecognitionOption
from skype_bot.models.sequence import ACTION_PHASES, validate_action_array
from skype_bot.models.workflow import CallBackLink, Workflow

__all__ = [
    "ACTION_PHASES",
    "ActionBase",
    "Activity",
    "ActivityIncomingBase",
    "Answer",
    "AnswerAppHostedMedia",
    "AnswerAppHostedMediaOutcome",
    "AnswerOutcome",
    "Attachment",
    "AttachmentInfo",
    "AttachmentResponse",
    "AttachmentViewInfo",
    "CallBackLink",
    "CallStateChangeNotification",
    "ChoiceOutcome",
    "CollectDigits",
    "CollectDigitsOutcome",
    "ContactRelationUpdate",
    "Conversation",
    "ConversationBase",
    "ConversationResult",
    "ConversationUpdate",
    "EventType",
    "Hangup",
    "HangupOutcome",
    "IncomingAttachment",
    "IncomingMessage",
    "Message",
    "ModelBase",
    "NotificationBase",
    "NotificationResponse",
    "OperationOutcomeBase",
    "Participant",
    "PlaceCall",
    "PlaceCallOutcome",
    "PlayPrompt",
    "PlayPromptOutcome",
    "Prompt",
    "RecognitionOption",
    "Recognize",
    "RecognizeOutcome",
    "Record",
    "RecordOutcome",
    "Reject",
    "RejectOutcome",
    "RosterParticipant",
    "RosterUpdateNotification",
    "TranscriptionOutcome",
    "Transfer",
    "TransferOutcome",
    "VideoSubscription",
    "VideoSubscriptionOutcome",
    "WebhookEvent",
    "WebhookMessage",
    "Workflow",
    "WorkflowValidationOutcome",
    "instantiate_action",
    "instantiate_incoming_activity",
    "instantiate_notification",
    "instantiate_operation_outcome",
    "validate_action_array",
]
