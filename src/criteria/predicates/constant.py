"""Predicates whose result ignores context and date."""

from __future__ import annotations

from criteria.predicates.shared import require_arity
from criteria.types import EvalContext


def run_always(ctx: EvalContext, args: tuple[str, ...]) -> bool:
    require_arity("always", args, 0)
    return True


def run_never(ctx: EvalContext, args: tuple[str, ...]) -> bool:
    require_arity("never", args, 0)
    return False


def run_random(ctx: EvalContext, args: tuple[str, ...]) -> bool:
    """Return a uniformly random boolean drawn from the context RNG.

    Non-deterministic unless the evaluator was given a seeded RNG.
    """
    require_arity("random", args, 0)
    return bool(ctx.rng.getrandbits(1))
