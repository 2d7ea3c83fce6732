"""Property-based tests using hypothesis."""

from __future__ import annotations

import base64
from datetime import timezone
from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st

from structvalue import (
    InvalidEncodingError,
    UnsupportedTypeError,
    Value,
    as_python,
    new_value,
)

scalars = st.one_of(
    st.none(),
    st.booleans(),
    st.floats(allow_nan=False, allow_infinity=False),
    st.text(),
    st.datetimes(timezones=st.just(timezone.utc)),
)

documents = st.recursive(
    scalars,
    lambda children: st.lists(children, max_size=5)
    | st.dictionaries(st.text(max_size=10), children, max_size=5),
    max_leaves=20,
)

any_number = st.floats(allow_nan=True, allow_infinity=True)

lossy_documents = st.recursive(
    st.one_of(scalars, any_number, st.binary(max_size=16), st.integers(-(2**63), 2**64)),
    lambda children: st.lists(children, max_size=5)
    | st.dictionaries(st.text(max_size=10), children, max_size=5),
    max_leaves=20,
)


class TestRoundTripProperties:
    """Round trip properties of the codec."""

    @given(doc=documents)
    def test_representable_values_roundtrip(self, doc: Any) -> None:
        """decode(encode(v)) == v for None/bool/float/str/datetime trees."""
        assert as_python(new_value(doc)) == doc

    @given(number=st.sampled_from([float("nan"), float("inf"), float("-inf")]))
    def test_non_finite_numbers_become_sentinels(self, number: float) -> None:
        assert as_python(new_value(number)) in {"NaN", "Infinity", "-Infinity"}

    @given(data=st.binary())
    def test_bytes_become_base64(self, data: bytes) -> None:
        value = new_value(data)
        expected = base64.b64encode(data).decode("ascii")
        assert value.string_value == expected
        assert as_python(value) == expected

    @given(items=st.lists(st.integers(min_value=-(2**53), max_value=2**53)))
    def test_list_order_preserved(self, items: list[int]) -> None:
        assert as_python(new_value(items)) == [float(item) for item in items]

    @given(doc=lossy_documents)
    def test_decode_is_total(self, doc: Any) -> None:
        """Decoding any encoded value never raises."""
        as_python(new_value(doc))

    @given(doc=documents)
    def test_wire_form_reparses(self, doc: Any) -> None:
        """The JSON wire form of any encoded value can be parsed again."""
        Value.from_json(new_value(doc).to_json())


class TestFailureProperties:
    """Failure propagation properties."""

    @given(depth=st.integers(min_value=0, max_value=10), key=st.sampled_from(["\ud800", "x\udfff"]))
    def test_bad_key_fails_at_any_depth(self, depth: int, key: str) -> None:
        doc: Any = {key: 1}
        for _ in range(depth):
            doc = {"child": doc}

        with pytest.raises(InvalidEncodingError) as exc_info:
            new_value(doc)
        assert exc_info.value.path == ("child",) * depth

    @given(items=st.lists(st.integers(-(2**63), 2**63), min_size=1, max_size=20), data=st.data())
    def test_element_failure_reports_index(self, items: list[int], data: st.DataObject) -> None:
        index = data.draw(st.integers(min_value=0, max_value=len(items) - 1))
        broken: list[Any] = list(items)
        broken[index] = {"a set"}

        with pytest.raises(UnsupportedTypeError) as exc_info:
            new_value(broken)
        assert exc_info.value.path == (index,)
