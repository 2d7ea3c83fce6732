"""Value encoder for arbitrary Python data.

This module provides new_value(), new_struct() and new_list(), which convert
general-purpose Python values into Value, Struct and ListValue messages.

    ╔════════════════════════════════╤════════════════════════════════════════╗
    ║ Python type                    │ Conversion                             ║
    ╠════════════════════════════════╪════════════════════════════════════════╣
    ║ None                           │ stored as null_value                   ║
    ║ bool                           │ stored as bool_value                   ║
    ║ int (any numbers.Integral)     │ stored as number_value                 ║
    ║ float (any numbers.Real)       │ stored as number_value                 ║
    ║ bytes, bytearray, memoryview   │ stored as string_value; base64-encoded ║
    ║ str                            │ stored as string_value; must be UTF-8  ║
    ║ datetime                       │ stored as timestamp_value              ║
    ║ Pydantic model, dataclass,     │ flattened to a mapping, then stored    ║
    ║ NamedTuple                     │ as struct_value                        ║
    ║ Mapping[str, Any]              │ stored as struct_value                 ║
    ║ Sequence (list, tuple, ...)    │ stored as list_value                   ║
    ╚════════════════════════════════╧════════════════════════════════════════╝

Integers are stored as float64, so magnitudes above 2**53 lose precision.
"""

from __future__ import annotations

import base64
import logging
import numbers
from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any

from pydantic import ValidationError

from ..exceptions import (
    EncodeError,
    FlattenError,
    InvalidEncodingError,
    InvalidKeyError,
    MaxDepthError,
    NumberRangeError,
    TimestampRangeError,
    UnsupportedTypeError,
)
from ..messages.constructors import (
    new_bool_value,
    new_list_value,
    new_null_value,
    new_number_value,
    new_string_value,
    new_struct_value,
    new_timestamp_value,
)
from ..messages.value import ListValue, NullValue, Struct, Timestamp, Value
from .options import DEFAULT_OPTIONS, EncoderOptions

logger = logging.getLogger(__name__)


def new_value(v: Any, options: EncoderOptions | None = None) -> Value:
    """Construct a Value from a general-purpose Python value.

    Args:
        v: Value to convert (see the module table for supported types)
        options: Encoder options (defaults to DEFAULT_OPTIONS)

    Returns:
        Value holding exactly one kind

    Raises:
        InvalidEncodingError: If a string or mapping key is not valid UTF-8
        InvalidKeyError: If a mapping key is not a string
        UnsupportedTypeError: If a value has an unsupported type
        FlattenError: If a structured record cannot be flattened
        NumberRangeError: If an integer does not fit in a float64
        TimestampRangeError: If a datetime falls outside years 1 to 9999 UTC
        MaxDepthError: If nesting exceeds options.max_depth

    Examples:
        ```python
        from structvalue import new_value

        value = new_value({
            "firstName": "John",
            "isAlive": True,
            "age": 27,
            "phoneNumbers": [{"type": "home", "number": "212 555-1234"}],
            "spouse": None,
        })
        value.struct_value.fields["age"].number_value  # 27.0
        ```
    """
    return _encode(v, options or DEFAULT_OPTIONS, 0)


def new_struct(v: Mapping[str, Any], options: EncoderOptions | None = None) -> Struct:
    """Construct a Struct from a general-purpose Python mapping.

    The mapping keys must be valid UTF-8 strings. The values are converted
    using new_value().
    """
    return _encode_mapping(v, options or DEFAULT_OPTIONS, 0)


def new_list(v: Sequence[Any], options: EncoderOptions | None = None) -> ListValue:
    """Construct a ListValue from a general-purpose Python sequence.

    The elements are converted using new_value().
    """
    return _encode_sequence(v, options or DEFAULT_OPTIONS, 0)


def _encode(v: Any, options: EncoderOptions, depth: int) -> Value:
    """Encode a single value found ``depth`` containers below the top."""
    if v is None:
        return new_null_value()

    # Already-built messages pass through unchanged
    if isinstance(v, Value):
        return v
    if isinstance(v, Struct):
        return new_struct_value(v)
    if isinstance(v, ListValue):
        return new_list_value(v)
    if isinstance(v, Timestamp):
        return Value(timestamp_value=v)
    # NullValue is an IntEnum, check it before the number rules
    if isinstance(v, NullValue):
        return new_null_value()

    # bool is a subclass of int, check it first
    if isinstance(v, bool):
        return new_bool_value(v)

    if isinstance(v, numbers.Integral):
        try:
            return new_number_value(float(v))
        except OverflowError as e:
            raise NumberRangeError(f"integer {v} is too large to store as a number") from e

    if isinstance(v, numbers.Real):
        try:
            return new_number_value(float(v))
        except OverflowError as e:
            raise NumberRangeError(f"number {v} is too large to store as a float") from e

    # Binary data is checked before the generic sequence rule
    if isinstance(v, (bytes, bytearray, memoryview)):
        return new_string_value(base64.standard_b64encode(v).decode("ascii"))

    if isinstance(v, str):
        _check_utf8(v)
        return new_string_value(v)

    if isinstance(v, datetime):
        try:
            return new_timestamp_value(v)
        except ValidationError as e:
            raise TimestampRangeError(v) from e

    if options.flattener.can_flatten(v):
        return new_struct_value(_encode_mapping(_flatten(v, options), options, depth))

    if isinstance(v, Mapping):
        return new_struct_value(_encode_mapping(v, options, depth))

    if isinstance(v, Sequence):
        return new_list_value(_encode_sequence(v, options, depth))

    logger.debug("Rejecting value of unsupported type %s", type(v).__name__)
    raise UnsupportedTypeError(type(v).__name__)


def _encode_mapping(v: Mapping[Any, Any], options: EncoderOptions, depth: int) -> Struct:
    """Encode a mapping into a Struct; fails on the first bad key or value."""
    if depth + 1 > options.max_depth:
        raise MaxDepthError(options.max_depth)

    fields: dict[str, Value] = {}
    for key, item in v.items():
        if not isinstance(key, str):
            if not options.coerce_keys:
                raise InvalidKeyError(key)
            key = str(key)
        _check_utf8(key)
        try:
            fields[key] = _encode(item, options, depth + 1)
        except EncodeError as err:
            err.add_context(key)
            raise
    return Struct(fields=fields)


def _encode_sequence(v: Sequence[Any], options: EncoderOptions, depth: int) -> ListValue:
    """Encode a sequence into a ListValue; fails on the first bad element."""
    if depth + 1 > options.max_depth:
        raise MaxDepthError(options.max_depth)

    values: list[Value] = []
    for index, item in enumerate(v):
        try:
            values.append(_encode(item, options, depth + 1))
        except EncodeError as err:
            err.add_context(index, type(item).__name__)
            raise
    return ListValue(values=values)


def _flatten(v: Any, options: EncoderOptions) -> Mapping[Any, Any]:
    type_name = type(v).__name__
    logger.debug("Flattening %s record into a struct", type_name)
    try:
        return options.flattener.flatten(v)
    except Exception as e:
        raise FlattenError(type_name, e) from e


def _check_utf8(text: str) -> None:
    """Reject strings that cannot be encoded as UTF-8 (e.g. lone surrogates)."""
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidEncodingError(text) from e
