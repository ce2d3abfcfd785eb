"""
Wire enumerations for the messaging and calling services.
"""

from enum import Enum


# Messaging

class IncomingActivityType(str, Enum):
    ATTACHMENT = "attachment"
    CONTACT_RELATION_UPDATE = "contactRelationUpdate"
    CONVERSATION_UPDATE = "conversationUpdate"
    MESSAGE = "message"


class AttachmentType(str, Enum):
    IMAGE = "Image"
    VIDEO = "Video"


class AttachmentViewType(str, Enum):
    ORIGINAL = "original"
    THUMBNAIL = "thumbnail"


class ContactRelationAction(str, Enum):
    ADD = "add"
    REMOVE = "remove"


# Calling

class ActionType(str, Enum):
    ANSWER = "answer"
    ANSWER_APP_HOSTED_MEDIA = "answerAppHostedMedia"
    HANGUP = "hangup"
    PLAY_PROMPT = "playPrompt"
    RECORD = "record"
    RECOGNIZE = "recognize"
    REJECT = "reject"
    PLACE_CALL = "placeCall"
    VIDEO_SUBSCRIPTION = "videoSubscription"
    TRANSFER = "transfer"


class CallState(str, Enum):
    IDLE = "idle"
    INCOMING = "incoming"
    ESTABLISHING = "establishing"
    ESTABLISHED = "established"
    HOLD = "hold"
    UNHOLD = "unhold"
    TRANSFERRING = "transferring"
    REDIRECTING = "redirecting"
    TERMINATING = "terminating"
    TERMINATED = "terminated"


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Culture(str, Enum):
    EN_US = "en-US"


class DigitCollectionCompletionReason(str, Enum):
    INITIAL_SILENCE_TIMEOUT = "initialSilenceTimeout"
    INTER_DIGIT_TIMEOUT = "interDigitTimeout"
    COMPLETED_STOP_TONE_DETECTED = "completedStopToneDetected"
    CALL_TERMINATED = "callTerminated"
    TEMPORARY_SYSTEM_FAILURE = "temporarySystemFailure"


class ModalityType(str, Enum):
    UNKNOWN = "unknown"
    AUDIO = "audio"
    VIDEO = "video"
    VIDEO_BASED_SCREEN_SHARING = "videoBasedScreenSharing"


class MultipartField(str, Enum):
    """Form field names of a multipart callback carrying a recording."""

    RECORDED_AUDIO = "recordedAudio"
    CONVERSATION_RESULT = "conversationResult"


class NotificationType(str, Enum):
    ROSTER_UPDATE = "rosterUpdate"
    CALL_STATE_CHANGE = "callStateChange"


class Outcome(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"


class OutcomeType(str, Enum):
    ANSWER_OUTCOME = "answerOutcome"
    ANSWER_APP_HOSTED_MEDIA_OUTCOME = "answerAppHostedMediaOutcome"
    HANGUP_OUTCOME = "hangupOutcome"
    REJECT_OUTCOME = "rejectOutcome"
    PLACE_CALL_OUTCOME = "placeCallOutcome"
    PLAY_PROMPT_OUTCOME = "playPromptOutcome"
    RECORD_OUTCOME = "recordOutcome"
    RECOGNIZE_OUTCOME = "recognizeOutcome"
    WORKFLOW_VALIDATION_OUTCOME = "workflowValidationOutcome"
    VIDEO_SUBSCRIPTION_OUTCOME = "videoSubscriptionOutcome"
    TRANSFER_OUTCOME = "transferOutcome"


class RecognitionCompletionReason(str, Enum):
    INITIAL_SILENCE_TIMEOUT = "initialSilenceTimeout"
    INCORRECT_DTMF = "inCorrectDtmf"
    INTER_DIGIT_TIMEOUT = "interDigitTimeout"
    SPEECH_OPTION_MATCHED = "speechOptionMatched"
    DTMF_OPTION_MATCHED = "dtmfOptionMatched"
    CALL_TERMINATED = "callTerminated"
    TEMPORARY_SYSTEM_FAILURE = "temporarySystemFailure"


class RecordingCompletionReason(str, Enum):
    INITIAL_SILENCE_TIMEOUT = "initialSilenceTimeout"
    MAX_RECORDING_TIMEOUT = "maxRecordingTimeout"
    COMPLETED_SILENCE_DETECTED = "completedSilenceDetected"
    COMPLETED_STOP_TONE_DETECTED = "completedStopToneDetected"
    CALL_TERMINATED = "callTerminated"
    TEMPORARY_SYSTEM_FAILURE = "temporarySystemFailure"


class RecordingFormat(str, Enum):
    WMA = "wma"
    WAV = "wav"
    MP3 = "mp3"


class ResolutionFormat(str, Enum):
    SD360P = "sd360p"
    SD540P = "sd540p"
    HD720P = "hd720p"
    HD1080P = "hd1080p"


class SayAs(str, Enum):
    YEAR_MONTH_DAY = "yearMonthDay"
    MONTH_DAY_YEAR = "monthDayYear"
    DAY_MONTH_YEAR = "dayMonthYear"
    YEAR_MONTH = "yearMonth"
    MONTH_YEAR = "monthYear"
    MONTH_DAY = "monthDay"
    DAY_MONTH = "dayMonth"
    DAY = "day"
    MONTH = "month"
    YEAR = "year"
    CARDINAL = "cardinal"
    ORDINAL = "ordinal"
    LETTERS = "letters"
    TIME12 = "time12"
    TIME24 = "time24"
    TELEPHONE = "telephone"
    NAME = "name"
    PHONETIC_NAME = "phoneticName"


class TranscriptionCompletionReason(str, Enum):
    SUCCESSFUL_TRANSCRIPTION = "successfulTranscription"
    EXCEEDS_RECORDING_LIMIT = "exceedsRecordingLimit"
    CALL_TERMINATED = "callTerminated"
    TEMPORARY_SYSTEM_FAILURE = "temporarySystemFailure"


class VideoSubscriptionMode(str, Enum):
    MANUAL = "manual"
    AUTO = "auto"


class VoiceGender(str, Enum):
    MALE = "male"
    FEMALE = "female"
