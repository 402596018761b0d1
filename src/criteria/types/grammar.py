"""Frozen dataclasses for parsed clauses and expressions."""

from __future__ import annotations

from dataclasses import dataclass

from criteria.types.common import Combinator


@dataclass(frozen=True)
class Clause:
    """A single predicate invocation: name plus raw string arguments."""

    name: str
    args: tuple[str, ...]
    text: str


@dataclass(frozen=True)
class Expression:
    """One clause, or two clause strings joined by a single combinator."""

    left: str
    combinator: Combinator | None = None
    right: str | None = None

    @property
    def is_compound(self) -> bool:
        return self.combinator is not None
