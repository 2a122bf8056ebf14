"""Shared fixtures: the Lisbon couple context and a pinned reference date."""

from datetime import date

import pytest

from core.context import normalize_context

AS_OF = date(2026, 10, 19)


def lisbon_fields(**overrides) -> dict:
    fields = {
        "location": "Lisbon",
        "wedding_date": "2027-07-10",
        "guest_count": 120,
        "budget_min": 35000,
        "budget_max": 45000,
        "priorities": ["food", "elegance", "photos"],
        "vibe_words": ["modern", "romantic", "minimalist"],
        "non_negotiable": "Excellent food experience",
    }
    fields.update(overrides)
    return fields


@pytest.fixture
def as_of() -> date:
    return AS_OF


@pytest.fixture
def base_fields() -> dict:
    return lisbon_fields()


@pytest.fixture
def base_context(base_fields):
    return normalize_context(base_fields, today=AS_OF)


@pytest.fixture
def make_context():
    """Build a normalized context from the Lisbon fields plus overrides."""

    def _make(**overrides):
        return normalize_context(lisbon_fields(**overrides), today=AS_OF)

    return _make
