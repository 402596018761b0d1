"""Check-report building and rendering for ``criteria check``."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from criteria.evaluator import Criteria


@dataclass(frozen=True)
class RuleResult:
    """Outcome of one named rule."""

    rule: str
    expression: str
    result: bool

    def to_dict(self) -> dict[str, Any]:
        return {"rule": self.rule, "expression": self.expression, "result": self.result}


def evaluate_rules(evaluator: Criteria, rules: Mapping[str, str]) -> list[RuleResult]:
    """Evaluate named expressions in order against one evaluator.

    Sharing the evaluator keeps "today" identical for every rule. Clause
    errors propagate.
    """
    return [
        RuleResult(rule=name, expression=expression, result=evaluator.evaluate(expression))
        for name, expression in rules.items()
    ]


def render_text(results: list[RuleResult]) -> str:
    """Render one ``name: true|false`` line per rule."""
    if not results:
        return "No rules configured."
    width = max(len(item.rule) for item in results)
    return "\n".join(f"{item.rule.ljust(width)}  {format_bool(item.result)}" for item in results)


def render_json(evaluator: Criteria, results: list[RuleResult]) -> str:
    """Render the check payload described by ``schemas/check.schema.json``."""
    payload = {
        "today": evaluator.context.today.isoformat(),
        "passed": all(item.result for item in results),
        "results": [item.to_dict() for item in results],
    }
    return json.dumps(payload, indent=2, sort_keys=True)


def format_bool(value: bool) -> str:
    return "true" if value else "false"
