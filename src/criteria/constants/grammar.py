"""Structural tokens of the rule expression grammar."""

from __future__ import annotations

import re

CLAUSE_SEPARATOR: str = ":"
ARGUMENT_SEPARATOR: str = ","

AND: str = "&&"
OR: str = "||"
COMBINATORS: tuple[str, ...] = (AND, OR)

PREDICATE_NAME_PATTERN: re.Pattern[str] = re.compile(r"^[A-Za-z0-9_]+$")
NUMERIC_PATTERN: re.Pattern[str] = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")
