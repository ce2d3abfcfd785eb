"""
Settings of the recognize action: menu choices and digit collection.
"""

from typing import Any, Optional

from skype_bot import validation as v
from skype_bot.models import limits
from skype_bot.models.base import ModelBase
from skype_bot.models.dtmf import validate_dtmfs, validate_dtmfs_array


class RecognitionOption(ModelBase):
    """One menu choice, selected by speech, by a DTMF tone or by either."""

    name: Optional[str] = None
    speech_variation: Optional[list[str]] = None
    dtmf_variation: Optional[str] = None

    def validate(self, context: Any = None) -> list[str]:
        errors = v.validate_string(context, self.name, "RecognitionOption.name")

        if self.speech_variation is None and self.dtmf_variation is None:
            errors.append("Neither RecognitionOption.speechVariation or RecognitionOption.dmftVariation is set")
            return errors

        if self.speech_variation is not None:
            errors += v.validate_array(
                context,
                self.speech_variation,
                "RecognitionOption.speechVariation",
                max_size=limits.NUMBER_OF_SPEECH_VARIATIONS.max,
            )
            if not errors:
                for item in self.speech_variation:
                    errors += v.validate_string(context, item, "RecognitionOption.speechVariation item")

        if self.dtmf_variation is not None:
            errors += validate_dtmfs(context, self.dtmf_variation, "RecognitionOption.dtmfVariation")
        return errors


class CollectDigits(ModelBase):
    max_number_of_dtmfs: Optional[int] = None
    stop_tones: Optional[list[str]] = None

    def validate(self, context: Any = None) -> list[str]:
        if self.max_number_of_dtmfs is None and self.stop_tones is None:
            return ["Either CollectDigits.maxNumberOfDtmfs or CollectDigits.stopTones must be set"]

        errors = v.validate_optional_number(
            context,
            self.max_number_of_dtmfs,
            "CollectDigits.maxNumberOfDtmfs",
            limits.NUMBER_OF_DTMFS_EXPECTED.min,
            limits.NUMBER_OF_DTMFS_EXPECTED.max,
        )
        if self.stop_tones is not None:
            errors += validate_dtmfs_array(context, self.stop_tones, "CollectDigits.stopTones")
        return errors
