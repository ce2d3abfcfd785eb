"""
Base model shared by the messaging and calling payload types.

Models are built from untyped JSON maps with ``populate()``, which never
rejects user data; problems are reported by ``validate()`` as a list of
strings. Keyword construction (``Answer(operation_id="1")``) remains available
for application code.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Callable, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from skype_bot.errors import ModelConstructionError

M = TypeVar("M", bound="ModelBase")

NestedConstructor = Callable[[Any], Any]


class ModelBase(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    @classmethod
    def nested_fields(cls) -> dict[str, NestedConstructor]:
        """Field name -> constructor for fields holding nested models."""
        return {}

    @classmethod
    def populate(cls: type[M], data: Any = None) -> M:
        """Build an instance from a JSON-like mapping.

        Known fields present in ``data`` are copied as-is, or passed through
        their nested constructor (element-wise for lists). Unknown keys are
        ignored and absent fields keep the class defaults. An instance of
        the class is returned as a shallow copy.
        """
        if data is None:
            return cls.model_construct()
        if isinstance(data, cls):
            return data.model_copy()
        if not isinstance(data, Mapping):
            raise ModelConstructionError(f"{cls.__name__} input is not an object but {type(data).__name__}")

        constructors = cls.nested_fields()
        values: dict[str, Any] = {}
        for name, field in cls.model_fields.items():
            key = field.alias if field.alias in data else name
            if key not in data:
                continue
            raw = data[key]
            build = constructors.get(name)
            if build is None:
                values[name] = raw
            elif isinstance(raw, list):
                values[name] = [build(item) for item in raw]
            elif raw is not None:
                values[name] = build(raw)
        return cls.model_construct(**values)

    def validate(self, context: Any = None) -> list[str]:  # type: ignore[override]
        raise NotImplementedError(f"{type(self).__name__}.validate() not implemented")

    def is_valid(self, context: Any = None) -> bool:
        return not self.validate(context)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready dict using wire names; unset fields are dropped."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json", serialize_as_any=True, warnings=False)

    def _tag_errors(self, label: str, value: Any, expected: Any) -> list[str]:
        if value is not None and value != expected:
            shown = value.value if isinstance(value, Enum) else value
            return [f"{label} is set to invalid value {shown}"]
        return []


def build(model: type[M]) -> NestedConstructor:
    """Nested constructor for a plain (non-polymorphic) model type."""
    return model.populate


def read_discriminant(data: Any, key: str, family: str) -> Any:
    """Tag value of an untyped polymorphic payload, checked for shape first."""
    if data is None:
        raise ModelConstructionError(f"{family} data are null")
    if not isinstance(data, Mapping):
        raise ModelConstructionError(f"Invalid type of the {family} data")
    tag = data.get(key)
    if tag is None:
        raise ModelConstructionError(f"{key} attribute in the {family} data is undefined or null")
    return tag.value if isinstance(tag, Enum) else tag
