"""Predicates that read the evaluator's context data."""

from __future__ import annotations

from criteria.predicates.shared import (
    compare_ordered,
    context_value,
    is_empty,
    loosely_equal,
    require_arity,
)
from criteria.types import EvalContext


def run_exists(ctx: EvalContext, args: tuple[str, ...]) -> bool:
    """True when the key is present and its value is not empty.

    An absent key is a negative result, not an error.
    """
    require_arity("exists", args, 1)
    key = args[0]
    if key not in ctx.data:
        return False
    return not is_empty(ctx.data[key])


def run_eq(ctx: EvalContext, args: tuple[str, ...]) -> bool:
    require_arity("eq", args, 2)
    key, literal = args
    return loosely_equal(context_value(ctx, key), literal)


def run_neq(ctx: EvalContext, args: tuple[str, ...]) -> bool:
    require_arity("neq", args, 2)
    key, literal = args
    return not loosely_equal(context_value(ctx, key), literal)


def run_lt(ctx: EvalContext, args: tuple[str, ...]) -> bool:
    require_arity("lt", args, 2)
    key, literal = args
    return compare_ordered(context_value(ctx, key), literal) < 0


def run_lte(ctx: EvalContext, args: tuple[str, ...]) -> bool:
    require_arity("lte", args, 2)
    key, literal = args
    return compare_ordered(context_value(ctx, key), literal) <= 0


def run_gt(ctx: EvalContext, args: tuple[str, ...]) -> bool:
    require_arity("gt", args, 2)
    key, literal = args
    return compare_ordered(context_value(ctx, key), literal) > 0


def run_gte(ctx: EvalContext, args: tuple[str, ...]) -> bool:
    require_arity("gte", args, 2)
    key, literal = args
    return compare_ordered(context_value(ctx, key), literal) >= 0
