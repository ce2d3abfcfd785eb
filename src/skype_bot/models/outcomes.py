"""
Operation outcomes reported back by the calling service, one per action kind.

Fields that only make sense for a successful operation are checked on success
and must be absent on failure.
"""

from typing import Any, ClassVar, Optional

from skype_bot import validation as v
from skype_bot.errors import UnsupportedTypeError
from skype_bot.models.base import ModelBase, build, read_discriminant
from skype_bot.models.dtmf import validate_dtmfs
from skype_bot.models.enums import (
    Confidence,
    DigitCollectionCompletionReason,
    ModalityType,
    Outcome,
    OutcomeType,
    RecognitionCompletionReason,
    RecordingCompletionReason,
    TranscriptionCompletionReason,
)


class OperationOutcomeBase(ModelBase):
    TAG: ClassVar[Optional[OutcomeType]] = None

    type: Optional[OutcomeType] = None
    id: Optional[str] = None
    outcome: Optional[Outcome] = None
    failure_reason: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.outcome == Outcome.SUCCESS

    def validate(self, context: Any = None) -> list[str]:
        errors = v.validate_string(context, self.id, "OperationOutcomeBase.id")
        errors += v.validate_enum(context, self.type, OutcomeType, "OperationOutcomeBase.type")
        errors += v.validate_enum(context, self.outcome, Outcome, "OperationOutcomeBase.outcome")
        errors += v.validate_optional_string(context, self.failure_reason, "OperationOutcomeBase.failureReason")
        if self.TAG is not None:
            errors += self._tag_errors(f"{type(self).__name__}.type", self.type, self.TAG)
        return errors


class AnswerOutcome(OperationOutcomeBase):
    TAG: ClassVar[Optional[OutcomeType]] = OutcomeType.ANSWER_OUTCOME

    type: Optional[OutcomeType] = OutcomeType.ANSWER_OUTCOME


class AnswerAppHostedMediaOutcome(OperationOutcomeBase):
    TAG: ClassVar[Optional[OutcomeType]] = OutcomeType.ANSWER_APP_HOSTED_MEDIA_OUTCOME

    type: Optional[OutcomeType] = OutcomeType.ANSWER_APP_HOSTED_MEDIA_OUTCOME


class HangupOutcome(OperationOutcomeBase):
    TAG: ClassVar[Optional[OutcomeType]] = OutcomeType.HANGUP_OUTCOME

    type: Optional[OutcomeType] = OutcomeType.HANGUP_OUTCOME


class PlaceCallOutcome(OperationOutcomeBase):
    TAG: ClassVar[Optional[OutcomeType]] = OutcomeType.PLACE_CALL_OUTCOME

    type: Optional[OutcomeType] = OutcomeType.PLACE_CALL_OUTCOME
    accepted_modality_types: Optional[list[ModalityType]] = None

    def validate(self, context: Any = None) -> list[str]:
        errors = super().validate(context)
        if self.succeeded:
            errors += v.validate_enum_array(
                context, self.accepted_modality_types, ModalityType, "PlaceCallOutcome.acceptedModalityTypes"
            )
        return errors


class PlayPromptOutcome(OperationOutcomeBase):
    TAG: ClassVar[Optional[OutcomeType]] = OutcomeType.PLAY_PROMPT_OUTCOME

    type: Optional[OutcomeType] = OutcomeType.PLAY_PROMPT_OUTCOME


class ChoiceOutcome(ModelBase):
    completion_reason: Optional[RecognitionCompletionReason] = None
    choice_name: Optional[str] = None

    def validate(self, context: Any = None) -> list[str]:
        errors = v.validate_enum(
            context, self.completion_reason, RecognitionCompletionReason, "ChoiceOutcome.completionReason"
        )
        errors += v.validate_optional_string(context, self.choice_name, "ChoiceOutcome.choiceName")
        return errors


class CollectDigitsOutcome(ModelBase):
    completion_reason: Optional[DigitCollectionCompletionReason] = None
    digits: Optional[str] = None

    def validate(self, context: Any = None) -> list[str]:
        errors = v.validate_enum(
            context, self.completion_reason, DigitCollectionCompletionReason, "CollectDigitsOutcome.completionReason"
        )
        errors += v.validate_optional_string(context, self.digits, "CollectDigitsOutcome.digits")
        return errors


class RecognizeOutcome(OperationOutcomeBase):
    """Result of a recognize action: a matched menu choice or collected digits."""

    TAG: ClassVar[Optional[OutcomeType]] = OutcomeType.RECOGNIZE_OUTCOME

    type: Optional[OutcomeType] = OutcomeType.RECOGNIZE_OUTCOME
    choice_outcome: Optional[ChoiceOutcome] = None
    collect_digits_outcome: Optional[CollectDigitsOutcome] = None

    @classmethod
    def nested_fields(cls):
        return {"choice_outcome": build(ChoiceOutcome), "collect_digits_outcome": build(CollectDigitsOutcome)}

    def validate(self, context: Any = None) -> list[str]:
        errors = super().validate(context)
        if not self.succeeded:
            return errors

        has_choice = self.choice_outcome is not None
        has_digits = self.collect_digits_outcome is not None
        if has_choice and has_digits:
            errors.append("Both RecognizeOutcome.choiceOutcome and RecognizeOutcome.collectDigitsOutcome are set")
        elif not has_choice and not has_digits:
            errors.append("Neither RecognizeOutcome.choiceOutcome or RecognizeOutcome.collectDigitsOutcome is set")
        elif has_choice:
            errors += v.validate_typed_object(
                context, self.choice_outcome, ChoiceOutcome, "RecognizeOutcome.choiceOutcome", "ChoiceOutcome"
            )
        else:
            errors += v.validate_typed_object(
                context,
                self.collect_digits_outcome,
                CollectDigitsOutcome,
                "RecognizeOutcome.collectDigitsOutcome",
                "CollectDigitsOutcome",
            )
            digits = getattr(self.collect_digits_outcome, "digits", None)
            if isinstance(digits, str):
                for digit in digits:
                    errors += validate_dtmfs(context, digit, "RecognizeOutcome.collectDigitsOutcome.digits")
        return errors


class TranscriptionOutcome(ModelBase):
    outcome: Optional[Outcome] = None
    completion_reason: Optional[TranscriptionCompletionReason] = None
    text: Optional[str] = None
    has_profanity: Optional[bool] = False
    confidence: Optional[Confidence] = Confidence.HIGH

    def validate(self, context: Any = None) -> list[str]:
        errors = v.validate_boolean(context, self.has_profanity, "TranscriptionOutcome.hasProfanity")
        errors += v.validate_enum(context, self.outcome, Outcome, "TranscriptionOutcome.outcome")
        errors += v.validate_enum(
            context, self.completion_reason, TranscriptionCompletionReason, "TranscriptionOutcome.completionReason"
        )
        errors += v.validate_enum(context, self.confidence, Confidence, "TranscriptionOutcome.confidence")
        if self.outcome == Outcome.SUCCESS:
            errors += v.validate_string(context, self.text, "TranscriptionOutcome.text")
        elif self.text is not None:
            errors.append("TranscriptionOutcome.text must not be set when outcome is failure")
        return errors


class RecordOutcome(OperationOutcomeBase):
    """Result of a record action. The recorded audio itself arrives next to it, not inside."""

    TAG: ClassVar[Optional[OutcomeType]] = OutcomeType.RECORD_OUTCOME

    type: Optional[OutcomeType] = OutcomeType.RECORD_OUTCOME
    completion_reason: Optional[RecordingCompletionReason] = None
    length_of_recording_in_secs: Optional[float] = None
    transcription: Optional[TranscriptionOutcome] = None

    @classmethod
    def nested_fields(cls):
        return {"transcription": build(TranscriptionOutcome)}

    def validate(self, context: Any = None) -> list[str]:
        errors = super().validate(context)
        errors += v.validate_enum(
            context, self.completion_reason, RecordingCompletionReason, "RecordOutcome.completionReason"
        )
        if self.succeeded:
            errors += v.validate_number(
                context, self.length_of_recording_in_secs, "RecordOutcome.lengthOfRecordingInSecs", 1
            )
            errors += v.validate_optional_typed_object(
                context, self.transcription, TranscriptionOutcome, "RecordOutcome.transcription", "TranscriptionOutcome"
            )
        else:
            errors += v.validate_optional_number(
                context, self.length_of_recording_in_secs, "RecordOutcome.lengthOfRecordingInSecs", None, 0
            )
            if self.transcription is not None:
                errors.append("RecordOutcome.transcription must not be set when outcome is failure")
        return errors


class RejectOutcome(OperationOutcomeBase):
    TAG: ClassVar[Optional[OutcomeType]] = OutcomeType.REJECT_OUTCOME

    type: Optional[OutcomeType] = OutcomeType.REJECT_OUTCOME


class TransferOutcome(OperationOutcomeBase):
    TAG: ClassVar[Optional[OutcomeType]] = OutcomeType.TRANSFER_OUTCOME

    type: Optional[OutcomeType] = OutcomeType.TRANSFER_OUTCOME


class VideoSubscriptionOutcome(OperationOutcomeBase):
    TAG: ClassVar[Optional[OutcomeType]] = OutcomeType.VIDEO_SUBSCRIPTION_OUTCOME

    type: Optional[OutcomeType] = OutcomeType.VIDEO_SUBSCRIPTION_OUTCOME


class WorkflowValidationOutcome(OperationOutcomeBase):
    """Sent instead of any action outcome when the service rejected the whole workflow."""

    TAG: ClassVar[Optional[OutcomeType]] = OutcomeType.WORKFLOW_VALIDATION_OUTCOME

    type: Optional[OutcomeType] = OutcomeType.WORKFLOW_VALIDATION_OUTCOME


OUTCOME_TYPES: dict[str, type[OperationOutcomeBase]] = {
    OutcomeType.ANSWER_OUTCOME.value: AnswerOutcome,
    OutcomeType.ANSWER_APP_HOSTED_MEDIA_OUTCOME.value: AnswerAppHostedMediaOutcome,
    OutcomeType.HANGUP_OUTCOME.value: HangupOutcome,
    OutcomeType.PLACE_CALL_OUTCOME.value: PlaceCallOutcome,
    OutcomeType.PLAY_PROMPT_OUTCOME.value: PlayPromptOutcome,
    OutcomeType.RECOGNIZE_OUTCOME.value: RecognizeOutcome,
    OutcomeType.RECORD_OUTCOME.value: RecordOutcome,
    OutcomeType.REJECT_OUTCOME.value: RejectOutcome,
    OutcomeType.TRANSFER_OUTCOME.value: TransferOutcome,
    OutcomeType.VIDEO_SUBSCRIPTION_OUTCOME.value: VideoSubscriptionOutcome,
    OutcomeType.WORKFLOW_VALIDATION_OUTCOME.value: WorkflowValidationOutcome,
}


def instantiate_operation_outcome(data: Any) -> OperationOutcomeBase:
    """Build the concrete outcome named by ``data["type"]``."""
    tag = read_discriminant(data, "type", "outcome")
    model = OUTCOME_TYPES.get(tag) if isinstance(tag, str) else None
    if model is None:
        raise UnsupportedTypeError("outcome", tag)
    return model.populate(data)
