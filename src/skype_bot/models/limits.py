"""
Service-imposed limits. These mirror the remote services' documented limits
and are not configurable at runtime.
"""

from typing import NamedTuple


class Limit(NamedTuple):
    min: int
    max: int


# Messaging
MESSAGE_CONTENT_SIZE_BYTES = Limit(1, 1_024_000)
ATTACHMENT_REQUEST_SIZE_BYTES = Limit(1, 20_971_520)

# Calling
RECORDING_DURATION_SEC = Limit(10, 600)
SILENCE_TIMEOUT_SEC = Limit(1, 30)
INITIAL_SILENCE_TIMEOUT_SEC = Limit(1, 30)
INTER_DIGIT_TIMEOUT_SEC = Limit(1, 5)
NUMBER_OF_DTMFS_EXPECTED = Limit(1, 20)
NUMBER_OF_STOP_TONES = Limit(0, 5)
NUMBER_OF_SPEECH_VARIATIONS = Limit(0, 5)
SILENT_PROMPT_DURATION_SEC = Limit(0, 60)
LENGTH_OF_TTS_TEXT = Limit(0, 2048)
APP_STATE_LENGTH = Limit(0, 1024)
MEDIA_CONFIGURATION_LENGTH = Limit(0, 1024)
VIDEO_SOCKET_ID = Limit(0, 9)
