"""Tagged-union value messages.

These models mirror the well-known ``Value``/``Struct``/``ListValue`` messages
used to carry arbitrary JSON, extended with a ``Timestamp`` variant. A Value
behaves like a protobuf oneof: at most one of its fields is populated, and
``which_kind()`` tells which one.

The JSON wire form follows the JSON-equivalent mapping: a Struct is written as
an object, a ListValue as an array, a Timestamp as an RFC 3339 string and the
non-finite numbers as the strings "NaN", "Infinity" and "-Infinity".
"""

from __future__ import annotations

import enum
import math
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import pydantic_core
from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..exceptions import WireFormatError

# 0001-01-01T00:00:00Z and 9999-12-31T23:59:59Z
MIN_TIMESTAMP_SECONDS = -62135596800
MAX_TIMESTAMP_SECONDS = 253402300799

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

VALUE_KINDS = (
    "null_value",
    "bool_value",
    "number_value",
    "string_value",
    "timestamp_value",
    "struct_value",
    "list_value",
)


class NullValue(enum.IntEnum):
    """Singleton marker held by the Null variant."""

    NULL_VALUE = 0


class _Message(BaseModel):
    model_config = ConfigDict(
        # Values are immutable trees
        frozen=True,
        extra="forbid",
    )


class Timestamp(_Message):
    """A point in time, as seconds and nanoseconds since the Unix epoch (UTC).

    Attributes:
        seconds: Whole seconds since 1970-01-01T00:00:00Z
        nanos: Non-negative fraction of a second in nanoseconds
    """

    seconds: int = Field(default=0, ge=MIN_TIMESTAMP_SECONDS, le=MAX_TIMESTAMP_SECONDS)
    nanos: int = Field(default=0, ge=0, le=999_999_999)

    @classmethod
    def from_datetime(cls, dt: datetime) -> Timestamp:
        """Convert a datetime to a Timestamp.

        Naive datetimes are interpreted as UTC.

        Example:
            >>> Timestamp.from_datetime(datetime(1970, 1, 1, 0, 0, 1, 500))
            Timestamp(seconds=1, nanos=500000)
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        delta = dt - _EPOCH
        return cls(
            seconds=delta.days * 86400 + delta.seconds,
            nanos=delta.microseconds * 1000,
        )

    def to_datetime(self) -> datetime:
        """Convert to an aware UTC datetime, truncating to microseconds."""
        return _EPOCH + timedelta(seconds=self.seconds, microseconds=self.nanos // 1000)

    def to_rfc3339(self) -> str:
        """Render as RFC 3339 in UTC, e.g. ``2024-05-01T12:00:00.250Z``."""
        dt = _EPOCH + timedelta(seconds=self.seconds)
        text = dt.replace(tzinfo=None).isoformat(timespec="seconds")
        if self.nanos:
            # 3, 6 or 9 fractional digits, whichever is exact
            if self.nanos % 1_000_000 == 0:
                text += f".{self.nanos // 1_000_000:03d}"
            elif self.nanos % 1000 == 0:
                text += f".{self.nanos // 1000:06d}"
            else:
                text += f".{self.nanos:09d}"
        return text + "Z"


class Value(_Message):
    """A single JSON-equivalent value with exactly one populated kind.

    A Value with no kind set is tolerated and reads back as None.
    """

    null_value: Optional[NullValue] = None
    bool_value: Optional[bool] = None
    number_value: Optional[float] = None
    string_value: Optional[str] = None
    timestamp_value: Optional[Timestamp] = None
    struct_value: Optional[Struct] = None
    list_value: Optional[ListValue] = None

    @model_validator(mode="after")
    def check_single_kind(self) -> Value:
        populated = [name for name in VALUE_KINDS if getattr(self, name) is not None]
        if len(populated) > 1:
            raise ValueError(f"Value has more than one kind set: {', '.join(populated)}")
        return self

    def which_kind(self) -> str | None:
        """Return the name of the populated field, or None if unset."""
        for name in VALUE_KINDS:
            if getattr(self, name) is not None:
                return name
        return None

    def to_wire(self) -> Any:
        """Return the JSON-compatible Python form of this value."""
        kind = self.which_kind()
        if kind is None or kind == "null_value":
            return None
        if kind == "number_value":
            number = self.number_value
            if math.isnan(number):
                return "NaN"
            if math.isinf(number):
                return "Infinity" if number > 0 else "-Infinity"
            return number
        if kind == "timestamp_value":
            return self.timestamp_value.to_rfc3339()
        if kind == "struct_value":
            return self.struct_value.to_wire()
        if kind == "list_value":
            return self.list_value.to_wire()
        return getattr(self, kind)

    def to_json(self) -> bytes:
        """Marshal to JSON bytes."""
        return pydantic_core.to_json(self.to_wire())

    @classmethod
    def from_json(cls, data: str | bytes) -> Value:
        """Unmarshal JSON into a Value.

        Raises:
            WireFormatError: If data is not valid JSON
            EncodeError: If a string or key in data is not valid UTF-8
        """
        # Import here to avoid circular dependency
        from ..codec.encoder import new_value

        return new_value(_parse_json(data))


class Struct(_Message):
    """An interchange object: string keys mapped to Values."""

    fields: dict[str, Value] = Field(default_factory=dict)

    def to_wire(self) -> dict[str, Any]:
        return {key: value.to_wire() for key, value in self.fields.items()}

    def to_json(self) -> bytes:
        return pydantic_core.to_json(self.to_wire())

    @classmethod
    def from_json(cls, data: str | bytes) -> Struct:
        from ..codec.encoder import new_struct

        parsed = _parse_json(data)
        if not isinstance(parsed, dict):
            raise WireFormatError(f"expected a JSON object, got {type(parsed).__name__}")
        return new_struct(parsed)


class ListValue(_Message):
    """An interchange array: an ordered sequence of Values."""

    values: list[Value] = Field(default_factory=list)

    def to_wire(self) -> list[Any]:
        return [value.to_wire() for value in self.values]

    def to_json(self) -> bytes:
        return pydantic_core.to_json(self.to_wire())

    @classmethod
    def from_json(cls, data: str | bytes) -> ListValue:
        from ..codec.encoder import new_list

        parsed = _parse_json(data)
        if not isinstance(parsed, list):
            raise WireFormatError(f"expected a JSON array, got {type(parsed).__name__}")
        return new_list(parsed)


def _parse_json(data: str | bytes) -> Any:
    try:
        return pydantic_core.from_json(data)
    except ValueError as e:
        raise WireFormatError(f"Invalid JSON: {e}") from e


Value.model_rebuild()
Struct.model_rebuild()
ListValue.model_rebuild()

__all__ = [
    "ListValue",
    "NullValue",
    "Struct",
    "Timestamp",
    "Value",
    "VALUE_KINDS",
]
