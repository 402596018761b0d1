"""Tests for the fixed predicate table."""

from __future__ import annotations

import pytest

from criteria.constants.predicates import PREDICATE_NAMES
from criteria.predicates import PREDICATE_TABLE


def test_table_matches_declared_names() -> None:
    assert set(PREDICATE_TABLE) == PREDICATE_NAMES


def test_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        PREDICATE_TABLE["custom"] = lambda ctx, args: True  # type: ignore[index]


def test_names_are_case_sensitive() -> None:
    assert "Always" not in PREDICATE_TABLE
    assert "always" in PREDICATE_TABLE
