"""Predicate implementations, split by what they read.

All ``run_*`` functions are re-exported from this package.
"""

from __future__ import annotations

from criteria.predicates.calendar import run_days, run_months, run_weekday, run_weekend
from criteria.predicates.constant import run_always, run_never, run_random
from criteria.predicates.data import (
    run_eq,
    run_exists,
    run_gt,
    run_gte,
    run_lt,
    run_lte,
    run_neq,
)
from criteria.predicates.environment import run_env
from criteria.predicates.registry import PREDICATE_TABLE, Predicate

__all__ = [
    "PREDICATE_TABLE",
    "Predicate",
    "run_always",
    "run_days",
    "run_env",
    "run_eq",
    "run_exists",
    "run_gt",
    "run_gte",
    "run_lt",
    "run_lte",
    "run_months",
    "run_neq",
    "run_never",
    "run_random",
    "run_weekday",
    "run_weekend",
]
