"""
Field-level validators shared by every model.

Each validator returns a list of human readable error strings and never raises
for bad user data; callers concatenate the lists in the order they check their
fields. ``context`` is passed through untouched to nested ``validate()`` calls.
"""

import math
import re
from collections.abc import Hashable, Mapping
from enum import Enum
from typing import Any, Iterable, Optional

_NON_WHITESPACE = re.compile(r"\S")


def is_plain_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def _enum_values(enum_type: type[Enum]) -> list[Any]:
    return [member.value for member in enum_type]


def _key(item: Any) -> Any:
    if isinstance(item, Enum):
        return item.value
    return item if isinstance(item, Hashable) else id(item)


def _has_duplicates(items: list[Any]) -> bool:
    keys = {_key(item) for item in items}
    return len(keys) != len(items)


def _describe(value: Any) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def validate_string(
    context: Any,
    value: Any,
    name: Optional[str] = None,
    can_be_empty: bool = False,
    max_len: Optional[int] = None,
    min_len: Optional[int] = None,
) -> list[str]:
    name = name or "a string"
    if value is None:
        return [f"{name} must not be null"]
    if not isinstance(value, str):
        return [f"{name} is not a string"]

    errors = []
    if not can_be_empty and not _NON_WHITESPACE.search(value):
        errors.append(f"{name} must not be empty or whitespaces only")
    if min_len is not None and len(value) < min_len:
        errors.append(f"{name} length {len(value)} is less than allowed minimum {min_len}")
    if max_len is not None and max_len < len(value):
        errors.append(f"{name} length {len(value)} is more than allowed maximum {max_len}")
    return errors


def validate_optional_string(
    context: Any,
    value: Any,
    name: Optional[str] = None,
    can_be_empty: bool = False,
    max_len: Optional[int] = None,
    min_len: Optional[int] = None,
) -> list[str]:
    if value is None:
        return []
    return validate_string(context, value, name, can_be_empty, max_len, min_len)


def validate_number(
    context: Any,
    value: Any,
    name: Optional[str] = None,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
) -> list[str]:
    name = name or "a number"
    if value is None:
        return [f"{name} is null"]
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        return [f"{name} is not numeric"]

    # only one bound is reported, the minimum wins
    if min_value is not None and value < min_value:
        return [f"{name} value {value} is less than allowed minimum {min_value}"]
    if max_value is not None and max_value < value:
        return [f"{name} value {value} is more than allowed maximum {max_value}"]
    return []


def validate_optional_number(
    context: Any,
    value: Any,
    name: Optional[str] = None,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
) -> list[str]:
    if value is None:
        return []
    return validate_number(context, value, name, min_value, max_value)


def validate_boolean(context: Any, value: Any, name: Optional[str] = None) -> list[str]:
    name = name or "a boolean"
    if value is None:
        return [f"{name} is null"]
    if not isinstance(value, bool):
        return [f"{name} is not a boolean value but {type(value).__name__}"]
    return []


def validate_optional_boolean(context: Any, value: Any, name: Optional[str] = None) -> list[str]:
    if value is None:
        return []
    return validate_boolean(context, value, name)


def validate_enum(
    context: Any,
    value: Any,
    enum_type: type[Enum],
    name: Optional[str] = None,
    not_allowed: Optional[Iterable[Any]] = None,
) -> list[str]:
    if enum_type is None:
        raise ValueError("Enum type is not provided")
    name = name or "an enum"
    if value is None:
        return [f"{name} is null"]

    if not any(value == allowed for allowed in _enum_values(enum_type)):
        return [f"{name} value {_describe(value)} is invalid"]

    if not_allowed is not None:
        forbidden = [_describe(item) for item in not_allowed]
        if _describe(value) in forbidden:
            return [f"{name} must not have value from list {','.join(forbidden)}"]
    return []


def validate_optional_enum(
    context: Any,
    value: Any,
    enum_type: type[Enum],
    name: Optional[str] = None,
    not_allowed: Optional[Iterable[Any]] = None,
) -> list[str]:
    if value is None:
        return []
    return validate_enum(context, value, enum_type, name, not_allowed)


def validate_array(
    context: Any,
    value: Any,
    name: Optional[str] = None,
    can_be_empty: bool = False,
    can_have_duplicates: bool = False,
    max_size: Optional[int] = None,
) -> list[str]:
    name = name or "an array"
    if value is None:
        return [f"{name} is null"]
    if not isinstance(value, list):
        return [f"{name} is not instance of Array but {type(value).__name__}"]
    if not value:
        return [] if can_be_empty else [f"{name} is empty"]

    errors = []
    if not can_have_duplicates and _has_duplicates(value):
        errors.append(f"{name} contains duplicates")
    if max_size is not None and len(value) > max_size:
        errors.append(f"Number of items in {name} exceeds maximum value {max_size}")
    return errors


def validate_optional_array(
    context: Any,
    value: Any,
    name: Optional[str] = None,
    can_be_empty: bool = False,
    can_have_duplicates: bool = False,
    max_size: Optional[int] = None,
) -> list[str]:
    if value is None:
        return []
    return validate_array(context, value, name, can_be_empty, can_have_duplicates, max_size)


def validate_enum_array(
    context: Any,
    value: Any,
    enum_type: type[Enum],
    name: Optional[str] = None,
    not_allowed: Optional[Iterable[Any]] = None,
) -> list[str]:
    if enum_type is None:
        raise ValueError("Enum type is not provided")
    name = name or "an enum array"

    errors = validate_array(context, value, name)
    if errors:
        return errors

    for item in value:
        errors += validate_enum(context, item, enum_type, f"{name} item")
    for forbidden in not_allowed or []:
        if any(item == forbidden for item in value):
            errors.append(f"{name} must not contain value {_describe(forbidden)}")
    return errors


def validate_optional_enum_array(
    context: Any,
    value: Any,
    enum_type: type[Enum],
    name: Optional[str] = None,
    not_allowed: Optional[Iterable[Any]] = None,
) -> list[str]:
    if value is None:
        return []
    return validate_enum_array(context, value, enum_type, name, not_allowed)


def validate_array_of_strings(context: Any, value: Any, name: Optional[str] = None) -> list[str]:
    name = name or "a string array"
    errors = validate_array(context, value, name)
    if errors:
        return errors
    for item in value:
        errors += validate_string(context, item, f"{name} item")
    return errors


def validate_optional_array_of_strings(context: Any, value: Any, name: Optional[str] = None) -> list[str]:
    if value is None:
        return []
    return validate_array_of_strings(context, value, name)


def validate_typed_object(
    context: Any,
    item: Any,
    expected_type: type,
    name: Optional[str] = None,
    expected_type_name: Optional[str] = None,
) -> list[str]:
    from skype_bot.models.base import ModelBase

    name = name or "an object"
    expected_type_name = expected_type_name or "not specified"
    if item is None:
        return [f"{name} is null"]

    errors = []
    if not isinstance(item, expected_type):
        errors.append(f"{name} is not of expected type {expected_type_name} but of type {type(item).__name__}")
    # nested errors already carry their own field names
    if isinstance(item, ModelBase):
        errors += item.validate(context)
    return errors


def validate_optional_typed_object(
    context: Any,
    item: Any,
    expected_type: type,
    name: Optional[str] = None,
    expected_type_name: Optional[str] = None,
) -> list[str]:
    if item is None:
        return []
    return validate_typed_object(context, item, expected_type, name, expected_type_name)


def validate_typed_object_array(
    context: Any,
    value: Any,
    expected_type: type,
    name: Optional[str] = None,
    expected_type_name: Optional[str] = None,
) -> list[str]:
    name = name or "an object array"
    errors = validate_array(context, value, name)
    if errors:
        return errors
    for item in value:
        errors += validate_typed_object(context, item, expected_type, f"{name} item", expected_type_name)
    return errors


def validate_optional_typed_object_array(
    context: Any,
    value: Any,
    expected_type: type,
    name: Optional[str] = None,
    expected_type_name: Optional[str] = None,
) -> list[str]:
    if value is None:
        return []
    return validate_typed_object_array(context, value, expected_type, name, expected_type_name)


def validate_generic_object(context: Any, value: Any, name: Optional[str] = None, can_be_null: bool = True) -> list[str]:
    name = name or "an object"
    if value is None:
        return [] if can_be_null else [f"{name} must not be null"]
    if not is_plain_object(value):
        return [f"{name} is not an object but {type(value).__name__}"]
    return []


def validate_dictionary_of_strings(context: Any, value: Any, name: Optional[str] = None) -> list[str]:
    name = name or "an object with string properties only"
    errors = validate_generic_object(context, value, name, True)
    if errors or value is None:
        return errors

    for key, item in value.items():
        if key is None or key in ("null", "undefined"):
            errors.append(f"attribute name [{key}] in [{name}] is set to null or undefined")
            continue
        errors += validate_string(context, key, f"{name} key {key}")
        errors += validate_string(context, item, f"{name} value of {key}")
    return errors
