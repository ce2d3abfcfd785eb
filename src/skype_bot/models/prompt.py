"""
Prompt played out to the caller: synthesized text, a media file or silence.
"""

import re
from typing import Any, Optional

from skype_bot import validation as v
from skype_bot.models import limits
from skype_bot.models.base import ModelBase
from skype_bot.models.enums import Culture, SayAs, VoiceGender

_NON_WHITESPACE = re.compile(r"\S")

MAX_SILENCE_MS = limits.SILENT_PROMPT_DURATION_SEC.max * 1000


class Prompt(ModelBase):
    """Exactly one of ``value``, ``file_uri`` or a positive silence length is set."""

    value: Optional[str] = None
    file_uri: Optional[str] = None
    voice: Optional[VoiceGender] = None
    culture: Optional[Culture] = None
    silence_length_in_milli_seconds: Optional[int] = None
    emphasize: Optional[bool] = None
    say_as: Optional[SayAs] = None

    def has_text(self) -> bool:
        # a non-string value counts as set so its type gets reported
        if self.value is None:
            return False
        return not isinstance(self.value, str) or _NON_WHITESPACE.search(self.value) is not None

    def has_silence(self) -> bool:
        silence = self.silence_length_in_milli_seconds
        return isinstance(silence, (int, float)) and not isinstance(silence, bool) and silence > 0

    def validate(self, context: Any = None) -> list[str]:
        errors = []
        file_uri_set = self.file_uri is not None
        text_set = self.has_text()
        silence_set = self.has_silence()

        if not (file_uri_set or text_set or silence_set):
            errors.append("Neither Prompt.fileUri, Prompt.value or valid silence period are specified")
        if file_uri_set and text_set:
            errors.append("Prompt.fileUri and Prompt.value must not be specified at the same time")
        if silence_set and (file_uri_set or text_set):
            errors.append(
                "Prompt.silenceLengthInMilliSeconds must not be specified together with Prompt.fileUri or Prompt.value"
            )

        if file_uri_set:
            errors += v.validate_string(context, self.file_uri, "Prompt.fileUri")
        if text_set:
            errors += v.validate_string(context, self.value, "Prompt.value", max_len=limits.LENGTH_OF_TTS_TEXT.max)

        errors += v.validate_optional_number(
            context, self.silence_length_in_milli_seconds, "Prompt.silenceLengthInMilliSeconds", None, MAX_SILENCE_MS
        )
        errors += v.validate_optional_enum(context, self.voice, VoiceGender, "Prompt.voice")
        errors += v.validate_optional_enum(context, self.culture, Culture, "Prompt.culture")
        errors += v.validate_optional_enum(context, self.say_as, SayAs, "Prompt.sayAs")
        errors += v.validate_optional_boolean(context, self.emphasize, "Prompt.emphasize")
        return errors
