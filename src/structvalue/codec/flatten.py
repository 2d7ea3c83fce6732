"""Structured record flattening.

The encoder does not inspect records itself. It asks a RecordFlattener
whether an object is a record and, if so, for a mapping of field names to
field values, which is then encoded like any other mapping.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from pydantic import BaseModel


class RecordFlattener(Protocol):
    """Reduces a structured record to a mapping of field name to value."""

    def can_flatten(self, obj: Any) -> bool:
        ...

    def flatten(self, obj: Any) -> Mapping[str, Any]:
        ...


def is_namedtuple(obj: Any) -> bool:
    """Return True for instances of ``typing.NamedTuple``/``collections.namedtuple``."""
    return isinstance(obj, tuple) and hasattr(type(obj), "_fields") and hasattr(obj, "_asdict")


@dataclass(frozen=True)
class DefaultFlattener:
    """Flattens Pydantic models, dataclass instances and named tuples.

    Pydantic models go through ``model_dump()`` so custom serializers and
    aliases apply. Dataclasses and named tuples are flattened one level only;
    nested values are handled by the encoder.

    Attributes:
        by_alias: Use field aliases as keys for Pydantic models
    """

    by_alias: bool = False

    def can_flatten(self, obj: Any) -> bool:
        if isinstance(obj, BaseModel):
            return True
        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            return True
        return is_namedtuple(obj)

    def flatten(self, obj: Any) -> Mapping[str, Any]:
        if isinstance(obj, BaseModel):
            return obj.model_dump(mode="python", by_alias=self.by_alias)
        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            return {field.name: getattr(obj, field.name) for field in dataclasses.fields(obj)}
        if is_namedtuple(obj):
            return obj._asdict()
        raise TypeError(f"{type(obj).__name__} is not a structured record")
