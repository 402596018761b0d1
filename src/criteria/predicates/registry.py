"""Fixed predicate table.

Maps predicate names to their implementation functions. Only names in this
table can be invoked from a clause.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

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
from criteria.types import EvalContext

Predicate = Callable[[EvalContext, tuple[str, ...]], bool]

PREDICATE_TABLE: Mapping[str, Predicate] = MappingProxyType(
    {
        "always": run_always,
        "never": run_never,
        "random": run_random,
        "sometimes": run_random,
        "days": run_days,
        "months": run_months,
        "weekday": run_weekday,
        "weekend": run_weekend,
        "exists": run_exists,
        "eq": run_eq,
        "neq": run_neq,
        "lt": run_lt,
        "lte": run_lte,
        "gt": run_gt,
        "gte": run_gte,
        "env": run_env,
    }
)
