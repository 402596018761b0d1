"""Shared type aliases and dataclasses for Criteria."""

from .common import Combinator
from .evaluation import EvalContext
from .grammar import Clause, Expression

__all__ = [
    "Clause",
    "Combinator",
    "EvalContext",
    "Expression",
]
