"""Rule expression evaluator.

A :class:`Criteria` instance snapshots its context data, today's date and
an env lookup at construction, then evaluates any number of expressions
against that fixed state.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from criteria.clock import Clock, SystemClock
from criteria.constants.grammar import AND
from criteria.env import EnvLookup, ProcessEnvLookup
from criteria.exceptions import InvalidClauseError, PredicateError, UnknownPredicateError
from criteria.grammar import parse_clause, split_expression
from criteria.predicates.registry import PREDICATE_TABLE
from criteria.types import EvalContext

logger = logging.getLogger(__name__)


class Criteria:
    """Evaluate clause expressions such as ``days:mon,tue&&gte:score,10``."""

    def __init__(
        self,
        data: Mapping[str, Any] | None = None,
        *,
        clock: Clock | None = None,
        env: EnvLookup | None = None,
        rng: random.Random | None = None,
    ) -> None:
        clock = clock if clock is not None else SystemClock()
        self._ctx = EvalContext(
            data=MappingProxyType(dict(data or {})),
            today=clock.today(),
            env=env if env is not None else ProcessEnvLookup(),
            rng=rng if rng is not None else random.Random(),
        )

    @property
    def context(self) -> EvalContext:
        """The immutable state every predicate of this instance sees."""
        return self._ctx

    def evaluate(self, expression: str) -> bool:
        """Evaluate one clause, or two clauses joined by ``&&`` / ``||``.

        Both combinators short-circuit: the right clause is neither run nor
        allowed to fail when the left clause already decides the result.
        An error on the left always propagates.
        """
        parsed = split_expression(expression)
        if not parsed.is_compound:
            return self.evaluate_clause(expression)

        assert parsed.right is not None
        left = self.evaluate_clause(parsed.left)
        if parsed.combinator == AND:
            if not left:
                logger.debug("Short-circuit: skipped '%s' after false AND operand", parsed.right)
                return False
        elif left:
            logger.debug("Short-circuit: skipped '%s' after true OR operand", parsed.right)
            return True
        return self.evaluate_clause(parsed.right)

    def evaluate_clause(self, clause: str) -> bool:
        """Evaluate a single ``name[:arg,...]`` clause.

        Raises InvalidClauseError wrapping the predicate failure.
        """
        parsed = parse_clause(clause)
        try:
            result = self.call(parsed.name, *parsed.args)
        except PredicateError as exc:
            raise InvalidClauseError(clause, exc) from exc
        logger.debug("Clause '%s' -> %s", clause, result)
        return result

    def call(self, name: str, *args: str) -> bool:
        """Invoke a predicate by name with already-split string arguments.

        Raises the predicate's own error rather than InvalidClauseError.
        """
        predicate = PREDICATE_TABLE.get(name)
        if predicate is None:
            raise UnknownPredicateError(name)
        return predicate(self._ctx, tuple(args))
