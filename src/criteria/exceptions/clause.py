"""Exceptions raised while parsing and evaluating clauses."""

from __future__ import annotations

from criteria.exceptions.base import CriteriaError


class PredicateError(CriteriaError):
    """Base for failures raised by a single predicate invocation."""


class UnknownPredicateError(PredicateError, LookupError):
    """Raised when a clause names a predicate that is not in the table."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown predicate '{name}'")
        self.name = name


class MissingKeyError(PredicateError, LookupError):
    """Raised when a comparison references a key absent from the context."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Key '{key}' not provided")
        self.key = key


class ArgumentError(PredicateError, ValueError):
    """Raised on a wrong argument count or an unconvertible argument."""


class InvalidClauseError(CriteriaError, ValueError):
    """Raised to callers for any clause that cannot be evaluated.

    Wraps the underlying :class:`PredicateError` (also available as
    ``__cause__``) together with the offending clause text.
    """

    def __init__(self, clause: str, cause: PredicateError) -> None:
        super().__init__(f"Invalid clause '{clause}': {cause}")
        self.clause = clause
        self.cause = cause
