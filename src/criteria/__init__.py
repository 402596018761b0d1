"""Criteria: evaluate short rule expressions against a context and today's date."""

from __future__ import annotations

from criteria.clock import Clock, FixedClock, SystemClock
from criteria.env import EnvLookup, MappingEnvLookup, ProcessEnvLookup
from criteria.evaluator import Criteria
from criteria.exceptions import (
    ArgumentError,
    ConfigError,
    CriteriaError,
    InvalidClauseError,
    MissingKeyError,
    PredicateError,
    UnknownPredicateError,
)

__version__ = "0.1.0"

__all__ = [
    "ArgumentError",
    "Clock",
    "ConfigError",
    "Criteria",
    "CriteriaError",
    "EnvLookup",
    "FixedClock",
    "InvalidClauseError",
    "MappingEnvLookup",
    "MissingKeyError",
    "PredicateError",
    "ProcessEnvLookup",
    "SystemClock",
    "UnknownPredicateError",
    "__version__",
]
