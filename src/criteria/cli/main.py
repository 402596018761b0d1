"""CLI entrypoint for Criteria."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from criteria import __version__
from criteria.cli.handlers import handle_check, handle_eval, handle_validate_config
from criteria.constants.branding import CLI_DESCRIPTION


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="criteria",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    evaluate = subparsers.add_parser("eval", help="Evaluate one expression and print true or false")
    evaluate.add_argument("expression", help="Expression, e.g. 'weekday&&gte:score,10'")
    _add_config_arguments(evaluate)
    evaluate.add_argument(
        "-s",
        "--set",
        dest="assignments",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Context value (parsed as a YAML scalar; repeat flag for multiple values)",
    )
    evaluate.add_argument(
        "-e",
        "--env",
        dest="env_assignments",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Value visible to the env predicate (repeat flag for multiple values)",
    )
    evaluate.add_argument("-d", "--date", default=None, help="Evaluate as if today were YYYY-MM-DD")
    evaluate.add_argument("-v", "--verbose", action="store_true", help="Log clause-level diagnostics")

    check = subparsers.add_parser("check", help="Evaluate named rules from the config file")
    check.add_argument("rules", nargs="*", help="Rule names to evaluate (default: all configured rules)")
    _add_config_arguments(check)
    check.add_argument("--json", action="store_true", help="Emit a JSON report instead of text")
    check.add_argument("-v", "--verbose", action="store_true", help="Log clause-level diagnostics")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without evaluating")
    _add_config_arguments(validate)

    return parser


def _add_config_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding criteria.yaml")
    parser.add_argument("-c", "--config", type=Path, default=None, help="Explicit config file")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "eval":
        return handle_eval(args)
    if args.command == "check":
        return handle_check(args)
    if args.command == "validate-config":
        return handle_validate_config(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
