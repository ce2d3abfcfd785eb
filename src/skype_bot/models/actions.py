"""
Calling actions sent to the calling service inside a workflow.

Every concrete action presets its ``action`` tag. ``instantiate_action`` picks
the concrete class from the tag of an untyped map and raises on tags it does
not know.
"""

import json
from typing import Any, ClassVar, Optional

from pydantic import Field

from skype_bot import validation as v
from skype_bot.errors import UnsupportedTypeError
from skype_bot.models import limits
from skype_bot.models.base import ModelBase, build, read_discriminant
from skype_bot.models.dtmf import validate_dtmfs_array
from skype_bot.models.enums import (
    ActionType,
    Culture,
    ModalityType,
    RecordingFormat,
    ResolutionFormat,
    VideoSubscriptionMode,
)
from skype_bot.models.participant import Participant
from skype_bot.models.prompt import Prompt
from skype_bot.models.recognition import CollectDigits, RecognitionOption

FORBIDDEN_CALL_MODALITIES = (ModalityType.UNKNOWN, ModalityType.VIDEO_BASED_SCREEN_SHARING)


class ActionBase(ModelBase):
    """Fields shared by all actions.

    ``is_stand_alone_action`` marks an action that must be the only one in its
    list. It is local state and never goes over the wire.
    """

    TAG: ClassVar[Optional[ActionType]] = None

    operation_id: Optional[str] = None
    action: Optional[ActionType] = None
    additional_data: Optional[dict[str, Any]] = None
    is_stand_alone_action: bool = Field(default=False, exclude=True)

    def validate(self, context: Any = None) -> list[str]:
        errors = v.validate_string(context, self.operation_id, "ActionBase.operationId")
        errors += v.validate_enum(context, self.action, ActionType, "ActionBase.action")
        errors += v.validate_generic_object(context, self.additional_data, "ActionBase.additionalData")
        errors += v.validate_boolean(context, self.is_stand_alone_action, "ActionBase.isStandAloneAction")
        if self.TAG is not None:
            errors += self._tag_errors(f"{type(self).__name__}.action", self.action, self.TAG)
        return errors


class Answer(ActionBase):
    TAG: ClassVar[Optional[ActionType]] = ActionType.ANSWER

    action: Optional[ActionType] = ActionType.ANSWER
    accept_modality_types: Optional[list[ModalityType]] = Field(default_factory=lambda: [ModalityType.AUDIO])

    def validate(self, context: Any = None) -> list[str]:
        errors = super().validate(context)
        errors += v.validate_enum_array(
            context, self.accept_modality_types, ModalityType, "Answer.acceptModalityTypes", FORBIDDEN_CALL_MODALITIES
        )
        return errors


class AnswerAppHostedMedia(Answer):
    """Answer with media handled by the application's own media platform."""

    TAG: ClassVar[Optional[ActionType]] = ActionType.ANSWER_APP_HOSTED_MEDIA

    action: Optional[ActionType] = ActionType.ANSWER_APP_HOSTED_MEDIA
    media_configuration: Optional[dict[str, Any]] = None

    def validate(self, context: Any = None) -> list[str]:
        errors = super().validate(context)
        errors += v.validate_generic_object(
            context, self.media_configuration, "AnswerAppHostedMedia.mediaConfiguration", False
        )
        if v.is_plain_object(self.media_configuration):
            length = len(json.dumps(self.media_configuration, separators=(",", ":"), default=str))
            if length > limits.MEDIA_CONFIGURATION_LENGTH.max:
                errors.append(
                    "AnswerAppHostedMedia.mediaConfiguration exceeds after JSON serialization the maximum "
                    f"allowed length of {limits.MEDIA_CONFIGURATION_LENGTH.max}"
                )
        return errors


class Hangup(ActionBase):
    TAG: ClassVar[Optional[ActionType]] = ActionType.HANGUP

    action: Optional[ActionType] = ActionType.HANGUP


class Reject(ActionBase):
    TAG: ClassVar[Optional[ActionType]] = ActionType.REJECT

    action: Optional[ActionType] = ActionType.REJECT


class PlaceCall(ActionBase):
    """Outbound call from ``source`` (the originator) to ``target``."""

    TAG: ClassVar[Optional[ActionType]] = ActionType.PLACE_CALL

    action: Optional[ActionType] = ActionType.PLACE_CALL
    source: Optional[Participant] = None
    target: Optional[Participant] = None
    subject: Optional[str] = None
    app_id: Optional[str] = None
    initiate_modality_types: Optional[list[ModalityType]] = Field(default_factory=lambda: [ModalityType.AUDIO])

    @classmethod
    def nested_fields(cls):
        return {"source": build(Participant), "target": build(Participant)}

    def validate(self, context: Any = None) -> list[str]:
        errors = super().validate(context)
        errors += v.validate_typed_object(context, self.source, Participant, "PlaceCall.source", "Participant")
        errors += v.validate_typed_object(context, self.target, Participant, "PlaceCall.target", "Participant")
        errors += v.validate_string(context, self.app_id, "PlaceCall.appId")
        errors += v.validate_optional_string(context, self.subject, "PlaceCall.subject")
        errors += v.validate_enum_array(
            context,
            self.initiate_modality_types,
            ModalityType,
            "PlaceCall.initiateModalityTypes",
            FORBIDDEN_CALL_MODALITIES,
        )
        if isinstance(self.source, Participant) and not self.source.originator:
            errors.append("PlaceCall.source must have set originator to true")
        if isinstance(self.target, Participant) and self.target.originator:
            errors.append("PlaceCall.target must have set originator to false")
        return errors


class PlayPrompt(ActionBase):
    TAG: ClassVar[Optional[ActionType]] = ActionType.PLAY_PROMPT

    action: Optional[ActionType] = ActionType.PLAY_PROMPT
    prompts: Optional[list[Prompt]] = None

    @classmethod
    def nested_fields(cls):
        return {"prompts": build(Prompt)}

    def validate(self, context: Any = None) -> list[str]:
        errors = super().validate(context)
        errors += v.validate_typed_object_array(context, self.prompts, Prompt, "PlayPrompt.prompts", "Prompt")
        return errors


class Recognize(ActionBase):
    """Menu (``choices``) or free digit collection (``collect_digits``), never both."""

    TAG: ClassVar[Optional[ActionType]] = ActionType.RECOGNIZE

    action: Optional[ActionType] = ActionType.RECOGNIZE
    play_prompt: Optional[PlayPrompt] = None
    barge_in_allowed: Optional[bool] = None
    culture: Optional[Culture] = None
    initial_silence_timeout_in_seconds: Optional[float] = None
    inter_digit_timeout_in_seconds: Optional[float] = None
    choices: Optional[list[RecognitionOption]] = None
    collect_digits: Optional[CollectDigits] = None

    @classmethod
    def nested_fields(cls):
        return {
            "play_prompt": build(PlayPrompt),
            "choices": build(RecognitionOption),
            "collect_digits": build(CollectDigits),
        }

    def validate(self, context: Any = None) -> list[str]:
        errors = super().validate(context)
        errors += v.validate_optional_typed_object(
            context, self.play_prompt, PlayPrompt, "Recognize.playPrompt", "PlayPrompt"
        )
        errors += v.validate_optional_number(
            context,
            self.initial_silence_timeout_in_seconds,
            "Recognize.initialSilenceTimeoutInSeconds",
            limits.INITIAL_SILENCE_TIMEOUT_SEC.min,
        )
        errors += v.validate_optional_number(
            context,
            self.inter_digit_timeout_in_seconds,
            "Recognize.interDigitTimeoutInSeconds",
            limits.INTER_DIGIT_TIMEOUT_SEC.min,
        )
        errors += v.validate_optional_boolean(context, self.barge_in_allowed, "Recognize.bargeInAllowed")
        errors += v.validate_optional_enum(context, self.culture, Culture, "Recognize.culture")

        has_choices = self.choices is not None
        has_digits = self.collect_digits is not None
        if not has_choices and not has_digits:
            errors.append("Neither Recognize.choices or Recognize.collectDigits is specified")
        elif has_choices and has_digits:
            errors.append("Both Recognize.choices or Recognize.collectDigits are specified")
        elif has_choices:
            errors += v.validate_typed_object_array(
                context, self.choices, RecognitionOption, "Recognize.choices", "RecognitionOption"
            )
            if not errors:
                errors += self.validate_uniqueness_of_choices()
        else:
            errors += v.validate_typed_object(
                context, self.collect_digits, CollectDigits, "Recognize.collectDigits", "CollectDigits"
            )
        return errors

    def validate_uniqueness_of_choices(self) -> list[str]:
        """DTMF and speech variations must be unique across all the choices, not only within one."""
        dtmfs = [choice.dtmf_variation for choice in self.choices or [] if choice.dtmf_variation is not None]
        speech = [
            phrase
            for choice in self.choices or []
            if choice.speech_variation is not None
            for phrase in choice.speech_variation
        ]

        errors = []
        if len(set(dtmfs)) != len(dtmfs):
            errors.append("Some dtmfs choices in the Recognize.choices are not unique")
        if len(set(speech)) != len(speech):
            errors.append("Some speech choices in the Recognize.choices are not unique")
        return errors


class Record(ActionBase):
    TAG: ClassVar[Optional[ActionType]] = ActionType.RECORD

    action: Optional[ActionType] = ActionType.RECORD
    play_prompt: Optional[PlayPrompt] = None
    max_duration_in_seconds: Optional[float] = None
    initial_silence_timeout_in_seconds: Optional[float] = None
    max_silence_timeout_in_seconds: Optional[float] = None
    recording_format: Optional[RecordingFormat] = None
    play_beep: Optional[bool] = None
    transcribe: Optional[bool] = None
    stop_tones: Optional[list[str]] = None

    @classmethod
    def nested_fields(cls):
        return {"play_prompt": build(PlayPrompt)}

    def validate(self, context: Any = None) -> list[str]:
        errors = super().validate(context)
        if self.stop_tones is not None:
            errors += validate_dtmfs_array(context, self.stop_tones, "Record.stopTones")
        errors += v.validate_optional_typed_object(context, self.play_prompt, PlayPrompt, "Record.playPrompt", "PlayPrompt")
        errors += v.validate_optional_number(
            context,
            self.max_duration_in_seconds,
            "Record.maxDurationInSeconds",
            limits.RECORDING_DURATION_SEC.min,
            limits.RECORDING_DURATION_SEC.max,
        )
        errors += v.validate_optional_number(
            context,
            self.initial_silence_timeout_in_seconds,
            "Record.initialSilenceTimeoutInSeconds",
            limits.INITIAL_SILENCE_TIMEOUT_SEC.min,
            limits.INITIAL_SILENCE_TIMEOUT_SEC.max,
        )
        errors += v.validate_optional_number(
            context,
            self.max_silence_timeout_in_seconds,
            "Record.maxSilenceTimeoutInSeconds",
            limits.SILENCE_TIMEOUT_SEC.min,
            limits.SILENCE_TIMEOUT_SEC.max,
        )
        errors += v.validate_optional_boolean(context, self.transcribe, "Record.transcribe")
        errors += v.validate_optional_boolean(context, self.play_beep, "Record.playBeep")
        errors += v.validate_optional_enum(context, self.recording_format, RecordingFormat, "Record.recordingFormat")
        return errors


class Transfer(ActionBase):
    """Blind transfer to another user (``8:<id>``)."""

    TAG: ClassVar[Optional[ActionType]] = ActionType.TRANSFER

    action: Optional[ActionType] = ActionType.TRANSFER
    target: Optional[Participant] = None

    @classmethod
    def nested_fields(cls):
        return {"target": build(Participant)}

    def validate(self, context: Any = None) -> list[str]:
        errors = super().validate(context)
        errors += v.validate_typed_object(context, self.target, Participant, "Transfer.target", "Participant")
        if not errors:
            if self.target.identity is not None and not self.target.identity.startswith("8:"):
                errors.append("Transfer.target identity must be user skype id, i.e. in form 8:<id>")
            if self.target.originator:
                errors.append("Transfer.target originator must be set to false")
        return errors


class VideoSubscription(ActionBase):
    """Pins a video socket to a participant (manual) or lets the service pick (auto)."""

    TAG: ClassVar[Optional[ActionType]] = ActionType.VIDEO_SUBSCRIPTION

    action: Optional[ActionType] = ActionType.VIDEO_SUBSCRIPTION
    app_state: Optional[str] = None
    socket_id: Optional[int] = None
    participant_identity: Optional[str] = None
    video_subscription_mode: Optional[VideoSubscriptionMode] = VideoSubscriptionMode.MANUAL
    video_modality: Optional[ModalityType] = ModalityType.UNKNOWN
    video_resolution: Optional[ResolutionFormat] = ResolutionFormat.SD360P

    def validate(self, context: Any = None) -> list[str]:
        errors = super().validate(context)
        errors += v.validate_number(
            context, self.socket_id, "VideoSubscription.socketId", limits.VIDEO_SOCKET_ID.min, limits.VIDEO_SOCKET_ID.max
        )
        errors += v.validate_enum(context, self.video_resolution, ResolutionFormat, "VideoSubscription.videoResolution")
        errors += v.validate_enum(
            context, self.video_subscription_mode, VideoSubscriptionMode, "VideoSubscription.videoSubscriptionMode"
        )
        errors += v.validate_enum(
            context, self.video_modality, ModalityType, "VideoSubscription.videoModality", [ModalityType.AUDIO]
        )
        errors += v.validate_optional_string(
            context, self.app_state, "VideoSubscription.appState", True, limits.APP_STATE_LENGTH.max
        )

        if self.video_subscription_mode == VideoSubscriptionMode.MANUAL:
            errors += v.validate_string(context, self.participant_identity, "VideoSubscription.participantIdentity")
            if self.video_modality == ModalityType.UNKNOWN:
                errors.append("VideoSubscription.videoModality cannot be set Unknown with videoSubscriptionMode=Manual")
        elif self.video_subscription_mode == VideoSubscriptionMode.AUTO:
            if self.participant_identity is not None:
                errors.append("VideoSubscription.participantIdentity must not be set with videoSubscriptionMode=Auto")
            if self.video_modality != ModalityType.UNKNOWN:
                errors.append("VideoSubscription.videoModality must be set to Unknown with videoSubscriptionMode=Auto")
        return errors


ACTION_TYPES: dict[str, type[ActionBase]] = {
    ActionType.ANSWER.value: Answer,
    ActionType.ANSWER_APP_HOSTED_MEDIA.value: AnswerAppHostedMedia,
    ActionType.HANGUP.value: Hangup,
    ActionType.PLACE_CALL.value: PlaceCall,
    ActionType.PLAY_PROMPT.value: PlayPrompt,
    ActionType.RECOGNIZE.value: Recognize,
    ActionType.RECORD.value: Record,
    ActionType.REJECT.value: Reject,
    ActionType.TRANSFER.value: Transfer,
    ActionType.VIDEO_SUBSCRIPTION.value: VideoSubscription,
}


def instantiate_action(data: Any, is_stand_alone: Optional[bool] = None) -> ActionBase:
    """Build the concrete action named by ``data["action"]``.

    ``is_stand_alone`` marks the result as an action that must not share its
    list with others; ``None`` keeps what the data says (default ``False``).
    """
    tag = read_discriminant(data, "action", "action")
    model = ACTION_TYPES.get(tag) if isinstance(tag, str) else None
    if model is None:
        raise UnsupportedTypeError("action", tag)

    action = model.populate(data)
    if is_stand_alone is not None:
        action.is_stand_alone_action = is_stand_alone
    return action
