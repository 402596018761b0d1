"""Configuration-related exceptions."""

from __future__ import annotations

from criteria.exceptions.base import CriteriaError


class ConfigError(CriteriaError, ValueError):
    """Raised when a criteria configuration file is invalid."""
