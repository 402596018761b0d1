"""Preflight validation shared by ``criteria validate-config`` and ``criteria check``."""

from __future__ import annotations

from pathlib import Path

from criteria.config import validate_config_file
from criteria.constants.validation import CFG007
from criteria.exceptions.validation import ValidationError, sort_errors


def preflight_validate(root: Path, config_path: Path | None = None) -> list[ValidationError]:
    """Run all preflight validation checks and return errors in deterministic order.

    Returns an empty list when everything is valid.
    """
    resolved_root = root.resolve()
    if not resolved_root.is_dir():
        return [
            ValidationError(
                code=CFG007,
                path=str(resolved_root),
                field="",
                message=f"root directory does not exist: {resolved_root}",
            )
        ]
    return sort_errors(validate_config_file(root, config_path, config_explicit=config_path is not None))
