"""Single-variant Value constructors.

Each factory wraps one Python value into the matching Value kind without any
validation. Use them to build Values directly when the type dispatch of
``new_value()`` is unnecessary.
"""

from __future__ import annotations

from datetime import datetime

from .value import ListValue, NullValue, Struct, Timestamp, Value


def new_null_value() -> Value:
    """Construct a new null Value."""
    return Value(null_value=NullValue.NULL_VALUE)


def new_bool_value(v: bool) -> Value:
    """Construct a new boolean Value."""
    return Value(bool_value=v)


def new_number_value(v: float) -> Value:
    """Construct a new number Value."""
    return Value(number_value=v)


def new_string_value(v: str) -> Value:
    """Construct a new string Value."""
    return Value(string_value=v)


def new_timestamp_value(v: datetime) -> Value:
    """Construct a new Timestamp Value."""
    return Value(timestamp_value=Timestamp.from_datetime(v))


def new_struct_value(v: Struct) -> Value:
    """Construct a new struct Value."""
    return Value(struct_value=v)


def new_list_value(v: ListValue) -> Value:
    """Construct a new list Value."""
    return Value(list_value=v)
