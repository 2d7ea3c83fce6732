#!/usr/bin/env python3
"""Basic usage example for structvalue.

This example demonstrates:
1. Converting a Python document to a Value
2. Inspecting the Value kinds
3. Marshalling to the JSON wire form
4. Decoding back to Python data
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from structvalue import EncodeError, Value, as_python, new_value
from structvalue.cli.tree import render_tree


class Order(BaseModel):
    """Customer order, flattened into a Struct when encoded."""

    order_id: int = Field(ge=0, description="Order number")
    total: float = Field(description="Order total")
    shipped: bool = Field(description="Shipped flag")


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("structvalue Basic Usage Example")
    print("=" * 60)
    print()

    document = {
        "order": Order(order_id=42, total=25.0, shipped=True),
        "seen": datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
        "payload": b"hi",
        "ratio": float("nan"),
        "tags": ["gift", "express"],
        "spouse": None,
    }

    print("1. Converting a document to a Value...")
    value = new_value(document)
    print()

    print("2. Value tree:")
    for line in render_tree(value).splitlines():
        print(f"   {line}")
    print()

    print("3. JSON wire form:")
    data = value.to_json()
    print(f"   {data.decode('utf-8')}")
    print(f"   ({len(data)} bytes)")
    print()

    print("4. Decoding back to Python...")
    decoded = as_python(Value.from_json(data))
    for key, item in decoded.items():
        print(f"   {key}: {item!r}")
    print()

    print("5. Rejecting bad input...")
    try:
        new_value({"tags": ["ok", {"a", "set"}]})
    except EncodeError as e:
        print(f"   {type(e).__name__}: {e}")
    print()


if __name__ == "__main__":
    main()
