"""Value decoder back to general-purpose Python data.

This module provides as_python(), as_dict() and as_list(), the inverse of the
encoder. Decoding never fails: an unset Value reads back as None.

Calling ``Value.to_json()`` and ``json.dumps(as_python(value), default=str)``
produce semantically equivalent JSON. For that reason the non-finite numbers
are returned as the strings "NaN", "Infinity" and "-Infinity", and strings are
returned unchanged (base64 text produced from bytes is not decoded back).
"""

from __future__ import annotations

import math
from typing import Any

from ..messages.value import ListValue, Struct, Value


def as_python(x: Value | None) -> Any:
    """Convert a Value to a general-purpose Python value.

    Timestamps come back as aware UTC datetimes, truncated to microseconds.
    A naive datetime given to the encoder was taken as UTC, so it does not
    compare equal to the decoded result.

    Args:
        x: Value to convert (None is accepted and returns None)

    Returns:
        None, bool, float, str, datetime (UTC), dict or list

    Example:
        >>> as_python(new_number_value(float("nan")))
        'NaN'
    """
    if x is None:
        return None

    kind = x.which_kind()

    if kind == "number_value":
        number = x.number_value
        if math.isnan(number):
            return "NaN"
        if math.isinf(number):
            return "Infinity" if number > 0 else "-Infinity"
        return number

    if kind == "string_value":
        return x.string_value

    if kind == "timestamp_value":
        return x.timestamp_value.to_datetime()

    if kind == "bool_value":
        return x.bool_value

    if kind == "struct_value":
        return as_dict(x.struct_value)

    if kind == "list_value":
        return as_list(x.list_value)

    # null_value or nothing set
    return None


def as_dict(x: Struct | None) -> dict[str, Any]:
    """Convert a Struct to a dict, decoding each value with as_python()."""
    if x is None:
        return {}
    return {key: as_python(value) for key, value in x.fields.items()}


def as_list(x: ListValue | None) -> list[Any]:
    """Convert a ListValue to a list, decoding each element with as_python()."""
    if x is None:
        return []
    return [as_python(value) for value in x.values]
