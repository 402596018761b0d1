"""Date predicates evaluated against the evaluator's fixed "today"."""

from __future__ import annotations

from criteria.constants.calendar import (
    DAY_NAMES,
    MAX_DAY,
    MAX_MONTH,
    MIN_DAY,
    MIN_MONTH,
    MONTH_NAMES,
    WEEKEND_DAYS,
)
from criteria.exceptions import ArgumentError
from criteria.predicates.shared import require_arity, require_min_arity
from criteria.types import EvalContext


def run_days(ctx: EvalContext, args: tuple[str, ...]) -> bool:
    """True when any argument names today's ISO weekday (number or name)."""
    require_min_arity("days", args, 1)
    wanted = {_normalize(arg, DAY_NAMES, MIN_DAY, MAX_DAY, "day") for arg in args}
    return ctx.today.isoweekday() in wanted


def run_months(ctx: EvalContext, args: tuple[str, ...]) -> bool:
    """True when any argument names the current month (number or name)."""
    require_min_arity("months", args, 1)
    wanted = {_normalize(arg, MONTH_NAMES, MIN_MONTH, MAX_MONTH, "month") for arg in args}
    return ctx.today.month in wanted


def run_weekday(ctx: EvalContext, args: tuple[str, ...]) -> bool:
    require_arity("weekday", args, 0)
    return ctx.today.isoweekday() not in WEEKEND_DAYS


def run_weekend(ctx: EvalContext, args: tuple[str, ...]) -> bool:
    require_arity("weekend", args, 0)
    return ctx.today.isoweekday() in WEEKEND_DAYS


def _normalize(value: str, names: dict[str, int], low: int, high: int, label: str) -> int:
    """Convert a numeric or named day/month argument to its ordinal."""
    token = value.strip().lower()
    if token.isascii() and token.isdigit():
        number = int(token)
        if not low <= number <= high:
            raise ArgumentError(f"{label} number must be between {low} and {high}, got {number}")
        return number
    if token in names:
        return names[token]
    raise ArgumentError(f"Unrecognized {label} name '{value}'")
