"""Configuration file defaults and allowed keys."""

from __future__ import annotations

CONFIG_FILENAME: str = "criteria.yaml"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"today", "context", "env", "rules"})
MAPPING_CONFIG_KEYS: tuple[str, ...] = ("context", "env", "rules")
