"""Exception hierarchy for structvalue.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from StructValueError for easy catching of any
structvalue-specific error.
"""

from __future__ import annotations

from typing import Any, Union

PathElement = Union[str, int]


def format_path(path: tuple[PathElement, ...]) -> str:
    """Render a container path as ``$.key[3].other``."""
    parts = ["$"]
    for element in path:
        if isinstance(element, int):
            parts.append(f"[{element}]")
        else:
            parts.append(f".{element}")
    return "".join(parts)


class StructValueError(Exception):
    """Base exception for all structvalue errors."""

    pass


class EncodeError(StructValueError):
    """Raised when a Python value cannot be converted to a Value.

    When the failing value sits inside a mapping or sequence, each enclosing
    container records its key or index with ``add_context()`` while the error
    propagates, so the exception keeps its original class and ``path`` points
    at the offending child from the outermost container down.

    Attributes:
        reason: Message describing the failure, without location
        path: Keys and indices leading to the failing value
        element_type: Type name of the failing sequence element, if any
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason
        self.path: tuple[PathElement, ...] = ()
        self.element_type: str | None = None

    def add_context(self, element: PathElement, element_type: str | None = None) -> None:
        """Prepend a key or index to the error path."""
        self.path = (element, *self.path)
        if element_type is not None and self.element_type is None:
            self.element_type = element_type

    @property
    def is_nested(self) -> bool:
        """True when the failure happened inside a container."""
        return bool(self.path)

    def __str__(self) -> str:
        if not self.path:
            return self.reason
        location = f"at {format_path(self.path)}"
        if self.element_type is not None:
            location += f" (element of type {self.element_type})"
        return f"{self.reason} {location}"


class InvalidEncodingError(EncodeError):
    """Raised when a string or mapping key is not valid UTF-8.

    Examples:
        - A str holding lone surrogates (``"\\ud800"``)
        - A mapping key decoded with ``surrogateescape``
    """

    def __init__(self, value: str) -> None:
        super().__init__(f"invalid UTF-8 in string: {value!r}")
        self.value = value


class UnsupportedTypeError(EncodeError):
    """Raised when a value's type matches none of the supported shapes.

    Examples:
        - set or frozenset (unordered)
        - Decimal, complex
        - Arbitrary objects that are not records
    """

    def __init__(self, type_name: str) -> None:
        super().__init__(f"invalid type: {type_name}")
        self.type_name = type_name


class InvalidKeyError(EncodeError):
    """Raised when a mapping key is not text and key coercion is disabled."""

    def __init__(self, key: Any) -> None:
        super().__init__(f"mapping key {key!r} of type {type(key).__name__} is not a string")
        self.key = key


class FlattenError(EncodeError):
    """Raised when a structured record cannot be flattened into a mapping.

    The underlying exception is chained as ``__cause__``.
    """

    def __init__(self, type_name: str, cause: BaseException) -> None:
        super().__init__(f"error decoding struct {type_name}: {cause}")
        self.type_name = type_name


class NumberRangeError(EncodeError):
    """Raised when an integer is too large to be held as a float64."""

    pass


class TimestampRangeError(EncodeError):
    """Raised when a datetime's UTC instant falls outside years 1 to 9999.

    Examples:
        - ``datetime(9999, 12, 31, 23, tzinfo=timezone(timedelta(hours=-5)))``
        - ``datetime(1, 1, 1, tzinfo=timezone(timedelta(hours=5)))``
    """

    def __init__(self, value: Any) -> None:
        super().__init__(f"datetime {value!r} is outside the timestamp range")
        self.value = value


class MaxDepthError(EncodeError):
    """Raised when nesting exceeds the configured maximum depth."""

    def __init__(self, max_depth: int) -> None:
        super().__init__(f"maximum nesting depth of {max_depth} exceeded")
        self.max_depth = max_depth


class WireFormatError(StructValueError):
    """Raised when JSON wire data cannot be parsed.

    Examples:
        - Truncated or malformed JSON text
        - Top-level JSON that is not an object where a Struct is expected
    """

    pass
