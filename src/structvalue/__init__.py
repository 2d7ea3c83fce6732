"""structvalue: Python values <-> JSON-equivalent tagged-union messages

A Python library that converts general-purpose Python data (None, bool,
numbers, str, bytes, datetime, dicts, lists and structured records) into
``Value``/``Struct``/``ListValue`` messages that carry arbitrary JSON plus
timestamps, and back again.

Key Features:
- Pydantic-based message modeling with a protobuf-style oneof
- Strict UTF-8 validation for strings and keys
- Bytes stored as base64 strings
- Pydantic models, dataclasses and named tuples flattened into structs
- JSON wire form that stays valid for NaN and Infinity

Quick Start:
    >>> from structvalue import new_value, as_python
    >>>
    >>> value = new_value({"a": 1, "b": [True, None]})
    >>> as_python(value)
    {'a': 1.0, 'b': [True, None]}
    >>> value.to_json()
    b'{"a":1.0,"b":[true,null]}'
"""

from __future__ import annotations

from .codec import (
    DEFAULT_OPTIONS,
    DefaultFlattener,
    EncoderOptions,
    RecordFlattener,
    as_dict,
    as_list,
    as_python,
    decode,
    encode,
    new_list,
    new_struct,
    new_value,
)
from .exceptions import (
    EncodeError,
    FlattenError,
    InvalidEncodingError,
    InvalidKeyError,
    MaxDepthError,
    NumberRangeError,
    StructValueError,
    TimestampRangeError,
    UnsupportedTypeError,
    WireFormatError,
)
from .messages import (
    ListValue,
    NullValue,
    Struct,
    Timestamp,
    Value,
    new_bool_value,
    new_list_value,
    new_null_value,
    new_number_value,
    new_string_value,
    new_struct_value,
    new_timestamp_value,
)

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "new_value",
    "new_struct",
    "new_list",
    "as_python",
    "as_dict",
    "as_list",
    # Messages
    "Value",
    "Struct",
    "ListValue",
    "Timestamp",
    "NullValue",
    # Constructors
    "new_null_value",
    "new_bool_value",
    "new_number_value",
    "new_string_value",
    "new_timestamp_value",
    "new_struct_value",
    "new_list_value",
    # Configuration
    "EncoderOptions",
    "DEFAULT_OPTIONS",
    "RecordFlattener",
    "DefaultFlattener",
    # Exceptions
    "StructValueError",
    "EncodeError",
    "InvalidEncodingError",
    "InvalidKeyError",
    "UnsupportedTypeError",
    "FlattenError",
    "NumberRangeError",
    "MaxDepthError",
    "TimestampRangeError",
    "WireFormatError",
    # Version
    "__version__",
]
