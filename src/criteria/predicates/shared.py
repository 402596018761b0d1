"""Shared helpers used across multiple predicate modules."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from criteria.constants.grammar import NUMERIC_PATTERN
from criteria.constants.predicates import EMPTY_STRINGS, FALSE_LITERALS, TRUE_LITERALS
from criteria.exceptions import ArgumentError, MissingKeyError
from criteria.types import EvalContext


def require_arity(name: str, args: tuple[str, ...], expected: int) -> None:
    """Raise ArgumentError unless exactly *expected* arguments were given."""
    if len(args) != expected:
        noun = "argument" if expected == 1 else "arguments"
        raise ArgumentError(f"{name} expects {expected} {noun}, got {len(args)}")


def require_min_arity(name: str, args: tuple[str, ...], minimum: int) -> None:
    """Raise ArgumentError when fewer than *minimum* arguments were given."""
    if len(args) < minimum:
        raise ArgumentError(f"{name} expects at least {minimum} argument(s), got {len(args)}")


def context_value(ctx: EvalContext, key: str) -> Any:
    """Return the context value for *key*, raising MissingKeyError when absent."""
    if key not in ctx.data:
        raise MissingKeyError(key)
    return ctx.data[key]


def to_number(value: Any) -> int | float | None:
    """Return *value* as a number when it is numeric or a numeric string.

    Booleans are never treated as numbers.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not NUMERIC_PATTERN.match(text):
            return None
        try:
            return int(text)
        except ValueError:
            return float(text)
    return None


def is_empty(value: Any) -> bool:
    """Loose emptiness: None, False, zero, "", "0" and empty collections."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value in EMPTY_STRINGS
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (Mapping, list, tuple, set, frozenset)):
        return len(value) == 0
    return False


def loosely_equal(stored: Any, literal: str) -> bool:
    """Compare a context value with a literal argument.

    Numeric when both sides look numeric, boolean literal matching when the
    stored value is a bool, otherwise plain string comparison.
    """
    if isinstance(stored, bool):
        token = literal.strip().lower()
        if token in TRUE_LITERALS:
            return stored is True
        if token in FALSE_LITERALS:
            return stored is False
        return False
    if stored is None:
        return literal == ""

    left = to_number(stored)
    right = to_number(literal)
    if left is not None and right is not None:
        return left == right
    return str(stored) == literal


def compare_ordered(stored: Any, literal: str) -> int:
    """Return -1, 0 or 1 ordering *stored* against *literal*."""
    left = to_number(stored)
    if left is not None:
        right = to_number(literal)
        if right is None:
            raise ArgumentError(f"'{literal}' is not numeric but the stored value {stored!r} is")
        return (left > right) - (left < right)
    if isinstance(stored, str):
        return (stored > literal) - (stored < literal)
    raise ArgumentError(f"Cannot order a value of type {type(stored).__name__}")
