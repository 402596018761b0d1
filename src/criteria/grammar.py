"""Parsing for clause and expression strings.

An expression is either one clause or two clauses joined by the first
``&&`` or ``||`` found. A clause is ``name`` or ``name:arg1,arg2,...``.
Neither separator can be escaped.
"""

from __future__ import annotations

from criteria.constants.grammar import (
    ARGUMENT_SEPARATOR,
    CLAUSE_SEPARATOR,
    COMBINATORS,
    PREDICATE_NAME_PATTERN,
)
from criteria.constants.predicates import PREDICATE_NAMES
from criteria.constants.validation import RULE001, RULE002, RULE003
from criteria.types import Clause, Expression


def parse_clause(text: str) -> Clause:
    """Split a clause into its predicate name and trimmed arguments.

    Only the first ``:`` separates name from arguments. An empty argument
    list yields ``()``, never ``("",)``.
    """
    name, separator, remainder = text.partition(CLAUSE_SEPARATOR)
    args: tuple[str, ...] = ()
    if separator and remainder.strip():
        args = tuple(arg.strip() for arg in remainder.split(ARGUMENT_SEPARATOR))
    return Clause(name=name.strip(), args=args, text=text)


def find_combinator(text: str) -> tuple[int, str] | None:
    """Return the position and token of the earliest combinator, if any."""
    found: tuple[int, str] | None = None
    for token in COMBINATORS:
        index = text.find(token)
        if index != -1 and (found is None or index < found[0]):
            found = (index, token)
    return found


def split_expression(text: str) -> Expression:
    """Split an expression at its first combinator.

    Anything after the first combinator, including further combinators,
    belongs to the right operand.
    """
    found = find_combinator(text)
    if found is None:
        return Expression(left=text)
    index, token = found
    return Expression(
        left=text[:index],
        combinator=token,  # type: ignore[arg-type]
        right=text[index + len(token) :],
    )


def lint_expression(text: str) -> list[tuple[str, str]]:
    """Statically check an expression without evaluating it.

    Returns ``(code, message)`` pairs; an empty list means the expression
    parses and names only known predicates.
    """
    problems: list[tuple[str, str]] = []
    expression = split_expression(text)
    operands = [expression.left]
    if expression.right is not None:
        if find_combinator(expression.right) is not None:
            problems.append((RULE002, "only one combinator ('&&' or '||') is allowed per expression"))
            return problems
        operands.append(expression.right)

    for operand in operands:
        clause = parse_clause(operand)
        if not PREDICATE_NAME_PATTERN.match(clause.name):
            problems.append((RULE003, f"malformed predicate name in '{operand.strip()}'"))
        elif clause.name not in PREDICATE_NAMES:
            problems.append((RULE001, f"unknown predicate '{clause.name}'"))
    return problems
