"""
Call participants.
"""

from typing import Any, Optional

from skype_bot import validation as v
from skype_bot.models.base import ModelBase
from skype_bot.models.enums import ModalityType


class Participant(ModelBase):
    identity: Optional[str] = None
    display_name: Optional[str] = None
    language_id: Optional[str] = None
    originator: Optional[bool] = False

    def validate(self, context: Any = None) -> list[str]:
        errors = v.validate_string(context, self.identity, "Participant.identity")
        errors += v.validate_optional_string(context, self.display_name, "Participant.displayName")
        errors += v.validate_optional_string(context, self.language_id, "Participant.languageId")
        errors += v.validate_boolean(context, self.originator, "Participant.originator")
        return errors


class RosterParticipant(ModelBase):
    """One media stream of a participant, as reported by roster updates."""

    identity: Optional[str] = None
    media_type: Optional[ModalityType] = None
    media_stream_direction: Optional[str] = None

    def validate(self, context: Any = None) -> list[str]:
        errors = v.validate_string(context, self.identity, "RosterParticipant.identity")
        errors += v.validate_string(context, self.media_stream_direction, "RosterParticipant.mediaStreamDirection")
        errors += v.validate_enum(context, self.media_type, ModalityType, "RosterParticipant.mediaType")
        return errors
