"""The ``env`` predicate, backed by the injected key-value lookup."""

from __future__ import annotations

from criteria.types import EvalContext


def run_env(ctx: EvalContext, args: tuple[str, ...]) -> bool:
    """True when the named value equals any of the remaining arguments.

    Fewer than two arguments, or an unset name, is a plain ``False``.
    """
    if len(args) < 2:
        return False
    name, *accepted = args
    current = ctx.env.lookup(name)
    if current is None:
        return False
    return current in accepted
