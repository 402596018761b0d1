"""Names and literal tables for the fixed predicate set."""

from __future__ import annotations

PREDICATE_NAMES: frozenset[str] = frozenset(
    {
        "always",
        "never",
        "random",
        "sometimes",
        "days",
        "months",
        "weekday",
        "weekend",
        "exists",
        "eq",
        "neq",
        "lt",
        "lte",
        "gt",
        "gte",
        "env",
    }
)

# Literals accepted when the stored value is a bool.
TRUE_LITERALS: frozenset[str] = frozenset({"true", "1", "yes", "on"})
FALSE_LITERALS: frozenset[str] = frozenset({"false", "0", "no", "off", ""})

# Values that ``exists`` treats as empty.
EMPTY_STRINGS: frozenset[str] = frozenset({"", "0"})
