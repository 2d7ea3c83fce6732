"""End-to-end integration tests."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from datetime import datetime, timezone

from pydantic import BaseModel, Field

from structvalue import (
    ListValue,
    Struct,
    Value,
    as_dict,
    as_list,
    as_python,
    decode,
    encode,
    new_list,
    new_struct,
)


class Invoice(BaseModel):
    """Invoice record."""

    invoice_id: int = Field(ge=0)
    amount: float
    discount_pct: int = Field(ge=0, le=100)
    paid: bool
    issued_at: datetime
    signature: bytes


@dataclass
class Batch:
    """Billing batch carrying a list of invoices."""

    name: str
    invoices: list[Invoice]
    notes: dict[str, str]


class TestEndToEndWorkflow:
    """Test complete end-to-end workflows."""

    def test_document_through_wire(self, sample_document: dict) -> None:
        """Python -> Value -> JSON -> Value -> Python."""
        value = encode(sample_document)
        restored = Value.from_json(value.to_json())

        assert restored == value
        decoded = decode(restored)
        assert decoded["firstName"] == "John"
        assert decoded["age"] == 27.0
        assert decoded["phoneNumbers"][0]["number"] == "212 555-1234"

    def test_decoded_output_is_json_safe(self) -> None:
        """Decoded values serialize with the standard json module."""
        value = encode({"ratio": float("nan"), "limits": [float("inf"), float("-inf"), 1.5]})
        text = json.dumps(decode(value), allow_nan=False)

        assert json.loads(text) == {"ratio": "NaN", "limits": ["Infinity", "-Infinity", 1.5]}
        assert json.loads(value.to_json()) == json.loads(text)

    def test_batch_workflow(self) -> None:
        """Records nested in records are flattened all the way down."""
        issued_at = datetime(2024, 5, 1, 6, 0, tzinfo=timezone.utc)
        batch = Batch(
            name="billing-7",
            invoices=[
                Invoice(
                    invoice_id=3,
                    amount=120.5,
                    discount_pct=15,
                    paid=False,
                    issued_at=issued_at,
                    signature=b"\x00\xff",
                )
            ],
            notes={"terms": "net 30"},
        )

        value = encode(batch)
        decoded = decode(value)

        assert decoded == {
            "name": "billing-7",
            "invoices": [
                {
                    "invoice_id": 3.0,
                    "amount": 120.5,
                    "discount_pct": 15.0,
                    "paid": False,
                    "issued_at": issued_at,
                    "signature": "AP8=",
                }
            ],
            "notes": {"terms": "net 30"},
        }

        wire = json.loads(value.to_json())
        assert wire["invoices"][0]["issued_at"] == "2024-05-01T06:00:00Z"

    def test_struct_and_list_entry_points(self) -> None:
        struct = new_struct({"count": 10, "tags": ["a", "b"]})
        assert isinstance(struct, Struct)
        assert as_dict(struct) == {"count": 10.0, "tags": ["a", "b"]}

        list_value = new_list([{"x": 1}, 2.5, "s"])
        assert isinstance(list_value, ListValue)
        assert as_list(list_value) == [{"x": 1.0}, 2.5, "s"]

    def test_large_integer_precision_loss(self) -> None:
        """Integers beyond 2**53 come back as the nearest float."""
        big = 2**63 - 1
        decoded = as_python(encode({"id": big}))["id"]
        assert decoded == float(big)
        assert not math.isnan(decoded)
