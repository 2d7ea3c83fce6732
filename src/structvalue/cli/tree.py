"""Variant tree rendering for the inspect CLI command."""

from __future__ import annotations

from ..messages.value import Value


def render_tree(value: Value, indent: str = "  ") -> str:
    """Render a Value as an indented tree of its kinds.

    Example:
        >>> print(render_tree(new_value({"a": 1, "b": [True, None]})))
        Struct{2}
          a: Number(1.0)
          b: List[2]
            [0] Bool(True)
            [1] Null
    """
    lines: list[str] = []
    _render(value, "", 0, indent, lines)
    return "\n".join(lines)


def describe(value: Value) -> str:
    """Return a one-line label for a single Value, without children."""
    kind = value.which_kind()
    if kind is None:
        return "Unset"
    if kind == "null_value":
        return "Null"
    if kind == "bool_value":
        return f"Bool({value.bool_value})"
    if kind == "number_value":
        return f"Number({value.number_value!r})"
    if kind == "string_value":
        return f"String({value.string_value!r})"
    if kind == "timestamp_value":
        return f"Timestamp({value.timestamp_value.to_rfc3339()})"
    if kind == "struct_value":
        return f"Struct{{{len(value.struct_value.fields)}}}"
    return f"List[{len(value.list_value.values)}]"


def _render(value: Value, label: str, level: int, indent: str, lines: list[str]) -> None:
    lines.append(f"{indent * level}{label}{describe(value)}")

    kind = value.which_kind()
    if kind == "struct_value":
        for key, child in value.struct_value.fields.items():
            _render(child, f"{key}: ", level + 1, indent, lines)
    elif kind == "list_value":
        for index, child in enumerate(value.list_value.values):
            _render(child, f"[{index}] ", level + 1, indent, lines)
