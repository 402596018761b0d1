"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import dataclasses
import os
import sys
from typing import Any

import yaml

from criteria.config import CriteriaConfig, load_config
from criteria.config.loader import parse_date
from criteria.exceptions import ConfigError, InvalidClauseError
from criteria.exceptions.validation import format_errors
from criteria.reporting import evaluate_rules, format_bool, render_json, render_text
from criteria.validation import preflight_validate


def handle_eval(args: argparse.Namespace) -> int:
    """Evaluate one expression; exit 0 when true, 1 when false, 2 on error."""
    try:
        config = _apply_overrides(load_config(args.root, args.config), args)
        extra_context = _parse_assignments(args.assignments, "--set", parse_values=True)
        evaluator = config.build_evaluator(extra_context)
        result = evaluator.evaluate(args.expression)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except InvalidClauseError as exc:
        print(f"Evaluation error: {exc}", file=sys.stderr)
        return 2

    print(format_bool(result))
    return 0 if result else 1


def handle_check(args: argparse.Namespace) -> int:
    """Evaluate named rules; exit 0 when all hold, 1 otherwise, 2 on error."""
    errors = preflight_validate(args.root, args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    try:
        config = load_config(args.root, args.config)
        names = args.rules or list(config.rules)
        selected = {name: config.rule(name) for name in names}
        evaluator = config.build_evaluator()
        results = evaluate_rules(evaluator, selected)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except InvalidClauseError as exc:
        print(f"Evaluation error: {exc}", file=sys.stderr)
        return 2

    print(render_json(evaluator, results) if args.json else render_text(results))
    return 0 if all(item.result for item in results) else 1


def handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = preflight_validate(args.root, args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


def _apply_overrides(config: CriteriaConfig, args: argparse.Namespace) -> CriteriaConfig:
    """Layer ``--date`` and ``--env`` flags over the loaded config."""
    if args.date is not None:
        config = dataclasses.replace(config, today=parse_date(args.date, "--date"))
    if args.env_assignments:
        env = dict(config.env) if config.env is not None else dict(os.environ)
        env.update(_parse_assignments(args.env_assignments, "--env", parse_values=False))
        config = dataclasses.replace(config, env=env)
    return config


def _parse_assignments(values: list[str], flag: str, *, parse_values: bool) -> dict[str, Any]:
    """Parse repeated ``KEY=VALUE`` flags.

    With *parse_values*, each value is read as a YAML scalar so ``10`` becomes
    an int and ``true`` a bool; anything else stays a string.
    """
    parsed: dict[str, Any] = {}
    for item in values:
        key, separator, raw = item.partition("=")
        key = key.strip()
        if not separator or not key:
            raise ConfigError(f"{flag} expects KEY=VALUE, got {item!r}")
        parsed[key] = _scalar(raw) if parse_values else raw
    return parsed


def _scalar(raw: str) -> Any:
    try:
        value = yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw
    if isinstance(value, (str, int, float, bool)):
        return value
    return raw
