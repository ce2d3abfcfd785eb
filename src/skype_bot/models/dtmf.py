"""
DTMF tone validation shared by record, recognize and collect-digits settings.
"""

from typing import Any, Optional

from skype_bot import validation as v
from skype_bot.models import limits

DTMF_TONES = frozenset("0123456789*#ABCD")


def validate_dtmfs(context: Any, value: Any, name: Optional[str] = None) -> list[str]:
    """A single tone: one char from 0-9, *, # or A-D."""
    name = name or "Dtmfs value"
    errors = v.validate_string(context, value, name, False, None, 1)
    if errors:
        return errors
    if value not in DTMF_TONES:
        errors.append(f"Value {value} in {name} is not valid Dtmfs char")
    return errors


def validate_dtmfs_array(context: Any, value: Any, name: Optional[str] = None) -> list[str]:
    name = name or "Dtmfs list"
    errors = v.validate_array(context, value, name, False, False, limits.NUMBER_OF_STOP_TONES.max)
    if errors:
        return errors
    for item in value:
        errors += validate_dtmfs(context, item, f"{name} item")
    return errors
