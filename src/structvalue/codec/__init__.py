"""Conversion between Python values and Value messages.

This module provides the encoder (Python -> Value) and the decoder
(Value -> Python), along with the encoder options and record flattening.
"""

from __future__ import annotations

from .decoder import as_dict, as_list, as_python
from .encoder import new_list, new_struct, new_value
from .flatten import DefaultFlattener, RecordFlattener
from .options import DEFAULT_OPTIONS, EncoderOptions

encode = new_value
decode = as_python

__all__ = [
    "encode",
    "decode",
    "new_value",
    "new_struct",
    "new_list",
    "as_python",
    "as_dict",
    "as_list",
    "EncoderOptions",
    "DEFAULT_OPTIONS",
    "RecordFlattener",
    "DefaultFlattener",
]
