"""Collect-all validation for ``criteria.yaml``.

Returns :class:`ValidationError` instances rather than raising, so callers
can report every problem in one pass.
"""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from criteria.config.loader import is_scalar, parse_date
from criteria.constants.config import ALLOWED_CONFIG_KEYS, CONFIG_FILENAME, MAPPING_CONFIG_KEYS
from criteria.constants.validation import CFG001, CFG002, CFG003, CFG004, CFG005, CFG006
from criteria.exceptions import ConfigError
from criteria.exceptions.validation import ValidationError, sort_errors
from criteria.grammar import lint_expression


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a criteria.yaml file and return all validation errors.

    Never raises. A missing default file is valid (defaults apply).
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(code=CFG001, path=path_str, field="", message=f"config file not found: {path}")
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(ValidationError(code=CFG002, path=path_str, field="", message=f"invalid YAML: {exc}"))
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(map(str, raw.keys())):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=key,
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(key, ALLOWED_CONFIG_KEYS),
                )
            )

    for key in MAPPING_CONFIG_KEYS:
        value = raw.get(key)
        if value is None:
            continue
        if not isinstance(value, dict):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=key,
                    message=f"invalid type for `{key}`",
                    hint="expected a mapping",
                )
            )
            continue
        _validate_mapping_keys(value, key, path_str, errors)

    env = raw.get("env")
    if isinstance(env, dict):
        _validate_env(env, path_str, errors)

    if "today" in raw:
        try:
            parse_date(raw["today"], "today")
        except ConfigError as exc:
            errors.append(ValidationError(code=CFG006, path=path_str, field="today", message=str(exc)))

    rules = raw.get("rules")
    if isinstance(rules, dict):
        _validate_rules(rules, path_str, errors)

    return sort_errors(errors)


def _validate_mapping_keys(
    mapping: dict[Any, Any], key_name: str, path_str: str, errors: list[ValidationError]
) -> None:
    for name in mapping:
        if not isinstance(name, str):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=f"{key_name}.{name}",
                    message=f"invalid key type in `{key_name}`",
                    hint="expected a string key",
                )
            )


def _validate_env(env: dict[Any, Any], path_str: str, errors: list[ValidationError]) -> None:
    for name, value in env.items():
        if isinstance(name, str) and not is_scalar(value):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=f"env.{name}",
                    message=f"invalid type for `env.{name}`",
                    hint="expected a scalar value",
                )
            )


def _validate_rules(rules: dict[Any, Any], path_str: str, errors: list[ValidationError]) -> None:
    """Type-check each rule expression and lint its grammar.

    Non-string rule names are reported by the key check and skipped here.
    """
    for name, expression in rules.items():
        if not isinstance(name, str):
            continue
        field_name = f"rules.{name}"
        if not isinstance(expression, str) or not expression.strip():
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=field_name,
                    message=f"invalid type for `{field_name}`",
                    hint="expected a non-empty expression string",
                )
            )
            continue
        for code, message in lint_expression(expression):
            errors.append(ValidationError(code=code, path=path_str, field=field_name, message=message))


def _suggest_key(key: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean' hint for a misspelled key, or an empty string."""
    matches = difflib.get_close_matches(key, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
