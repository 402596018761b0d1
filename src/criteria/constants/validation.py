"""Stable validation error codes for config and rule validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown top-level key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # invalid date value
CFG007: str = "CFG007"  # root directory not found

RULE001: str = "RULE001"  # unknown predicate
RULE002: str = "RULE002"  # more than one combinator
RULE003: str = "RULE003"  # malformed predicate name
