"""Config loading and normalization for ``criteria.yaml``."""

from __future__ import annotations

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Any

import yaml

from criteria.config.model import CriteriaConfig
from criteria.constants.config import ALLOWED_CONFIG_KEYS, CONFIG_FILENAME
from criteria.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> CriteriaConfig:
    """Load and validate config from ``criteria.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return CriteriaConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = set(map(str, raw.keys())) - ALLOWED_CONFIG_KEYS
    if unknown:
        raise ConfigError(f"Unknown config keys: {sorted(unknown)}")

    env_raw = raw.get("env")
    config = CriteriaConfig(
        today=parse_date(raw.get("today"), "today"),
        context=_ensure_mapping(raw.get("context"), "context"),
        env=None if env_raw is None else _ensure_scalar_mapping(env_raw, "env"),
        rules=_ensure_rules(raw.get("rules")),
    )
    logger.debug("Loaded config from %s (%d rules)", path, len(config.rules))
    return config


def parse_date(value: Any, key_name: str) -> date | None:
    """Accept a YAML date, a datetime, or an ISO ``YYYY-MM-DD`` string."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as exc:
            raise ConfigError(f"{key_name} must be an ISO date (YYYY-MM-DD), got {value!r}") from exc
    raise ConfigError(f"{key_name} must be an ISO date (YYYY-MM-DD), got {value!r}")


def _ensure_mapping(value: Any, key_name: str) -> dict[str, Any]:
    """Coerce a value to a string-keyed dict, raising ConfigError on type mismatch."""
    if value is None:
        return {}
    if not isinstance(value, dict) or not all(isinstance(key, str) for key in value):
        raise ConfigError(f"{key_name} must be a mapping with string keys")
    return dict(value)


def _ensure_scalar_mapping(value: Any, key_name: str) -> dict[str, str]:
    """Coerce a mapping of scalar values to a mapping of strings.

    YAML reads ``true``/``on``/``yes`` as bools; those are stored as
    ``"true"``/``"false"`` so env comparisons match the spelling users write.
    """
    mapping = _ensure_mapping(value, key_name)
    for key, item in mapping.items():
        if not is_scalar(item):
            raise ConfigError(f"{key_name}.{key} must be a scalar value")
    return {key: scalar_text(item) for key, item in mapping.items()}


def is_scalar(value: Any) -> bool:
    """Return whether *value* is a non-null YAML scalar."""
    return value is not None and not isinstance(value, (dict, list))


def scalar_text(value: Any) -> str:
    """Render a YAML scalar as the string an env lookup returns."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _ensure_rules(value: Any) -> dict[str, str]:
    """Validate the ``rules`` block: rule name -> expression string."""
    mapping = _ensure_mapping(value, "rules")
    for name, expression in mapping.items():
        if not isinstance(expression, str) or not expression.strip():
            raise ConfigError(f"rules.{name} must be a non-empty expression string")
    return mapping
