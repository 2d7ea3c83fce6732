"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import pytest


@pytest.fixture
def sample_document() -> dict[str, Any]:
    """Sample JSON-like document for testing."""
    return {
        "firstName": "John",
        "lastName": "Smith",
        "isAlive": True,
        "age": 27,
        "address": {
            "streetAddress": "21 2nd Street",
            "city": "New York",
            "state": "NY",
            "postalCode": "10021-3100",
        },
        "phoneNumbers": [
            {"type": "home", "number": "212 555-1234"},
            {"type": "office", "number": "646 555-4567"},
        ],
        "children": [],
        "spouse": None,
    }


@pytest.fixture
def sample_time() -> datetime:
    """Sample aware timestamp for testing."""
    return datetime(2024, 5, 1, 12, 30, 15, 250000, tzinfo=timezone.utc)
