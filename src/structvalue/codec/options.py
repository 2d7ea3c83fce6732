"""Configuration for the Value encoder."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from .flatten import DefaultFlattener, RecordFlattener


@dataclass(frozen=True)
class EncoderOptions:
    """Options controlling ``new_value()`` and friends.

    Attributes:
        max_depth: Maximum container nesting depth (default 200). Deeper input,
            including self-referencing lists and dicts, raises MaxDepthError
            instead of exhausting the interpreter stack.

        coerce_keys: Convert non-string mapping keys with ``str()`` instead of
            rejecting them with InvalidKeyError (default False).

        flattener: Collaborator that turns structured records (Pydantic models,
            dataclasses, named tuples) into mappings. Replace it to support
            other record types.

    Examples:
        ```python
        from structvalue import EncoderOptions, new_value

        # Accept {1: "a"} as {"1": "a"}
        options = EncoderOptions(coerce_keys=True)
        value = new_value({1: "a"}, options)

        # Shallow documents only
        value = new_value(document, EncoderOptions(max_depth=8))
        ```
    """

    max_depth: int = 200
    coerce_keys: bool = False
    flattener: RecordFlattener = field(default_factory=DefaultFlattener)

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.max_depth <= 0:
            raise ValueError(f"max_depth must be > 0, got {self.max_depth}")


DEFAULT_OPTIONS: Final[EncoderOptions] = EncoderOptions()
