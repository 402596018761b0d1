"""Shared exception hierarchy for Criteria."""

from __future__ import annotations

from .base import CriteriaError
from .clause import (
    ArgumentError,
    InvalidClauseError,
    MissingKeyError,
    PredicateError,
    UnknownPredicateError,
)
from .config import ConfigError

__all__ = [
    "ArgumentError",
    "ConfigError",
    "CriteriaError",
    "InvalidClauseError",
    "MissingKeyError",
    "PredicateError",
    "UnknownPredicateError",
]
