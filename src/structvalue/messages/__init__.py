"""Tagged-union value messages for structvalue.

This module provides the Value, Struct, ListValue and Timestamp models and the
single-variant constructors used to build them.
"""

from __future__ import annotations

from .constructors import (
    new_bool_value,
    new_list_value,
    new_null_value,
    new_number_value,
    new_string_value,
    new_struct_value,
    new_timestamp_value,
)
from .value import VALUE_KINDS, ListValue, NullValue, Struct, Timestamp, Value

__all__ = [
    "Value",
    "Struct",
    "ListValue",
    "Timestamp",
    "NullValue",
    "VALUE_KINDS",
    "new_null_value",
    "new_bool_value",
    "new_number_value",
    "new_string_value",
    "new_timestamp_value",
    "new_struct_value",
    "new_list_value",
]
