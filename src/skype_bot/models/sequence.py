"""
Ordering rules for the action list of a workflow.

Each action kind belongs to a phase. Setup actions come first (1), then the
interaction with the caller (2), then hangup (3). Reject (-2) lives on the
negative side and never mixes with the positive phases.
"""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, Optional

from skype_bot import validation as v
from skype_bot.models.actions import ActionBase
from skype_bot.models.enums import ActionType

ACTION_PHASES: Mapping[str, int] = MappingProxyType({
    ActionType.REJECT.value: -2,
    ActionType.ANSWER.value: 1,
    ActionType.ANSWER_APP_HOSTED_MEDIA.value: 1,
    ActionType.PLACE_CALL.value: 1,
    ActionType.VIDEO_SUBSCRIPTION.value: 1,
    ActionType.PLAY_PROMPT.value: 2,
    ActionType.RECORD.value: 2,
    ActionType.RECOGNIZE.value: 2,
    ActionType.TRANSFER.value: 2,
    ActionType.HANGUP.value: 3,
})


def _tag(action: ActionBase) -> str:
    tag = action.action
    return tag.value if isinstance(tag, Enum) else tag


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def action_phase(action: ActionBase, phases: Mapping[str, int] = ACTION_PHASES) -> int:
    return phases[_tag(action)]


def validate_action_array(
    context: Any,
    actions: Any,
    name: Optional[str] = None,
    phases: Mapping[str, int] = ACTION_PHASES,
) -> list[str]:
    """Check an ordered action list as a whole.

    Shape errors of the list or of any action stop here. Otherwise every rule
    adds its own error: standalone actions in a longer list, repeated action
    kinds, answer together with place call, and phases going backwards or
    crossing between the reject side and the call side.
    """
    name = name or "Action array"

    errors = v.validate_typed_object_array(context, actions, ActionBase, name, "ActionBase")
    if errors or len(actions) == 1:
        return errors

    kinds = [_tag(action) for action in actions]

    for action, kind in zip(actions, kinds):
        if action.is_stand_alone_action:
            errors.append(f"Standalone action of type {kind} must not be specified with other actions in {name}")

    if len(set(kinds)) != len(kinds):
        errors.append(f"Some action types are used multiple times in the {name}")

    if ActionType.ANSWER.value in kinds and ActionType.PLACE_CALL.value in kinds:
        errors.append(f"Answer and PlaceCall must not appear together in {name}")

    current = phases[kinds[0]]
    initial_sign = _sign(current)
    for previous_kind, kind in zip(kinds, kinds[1:]):
        following = phases[kind]
        if following < current or _sign(following) != initial_sign:
            errors.append(f"Actions {previous_kind} and {kind} are not in proper order in {name}")
        current = following
    return errors
