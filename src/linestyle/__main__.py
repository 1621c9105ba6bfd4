"""CLI entry-point for linestyle.

Usage:
    python -m linestyle <path> [<path> ...]
    python -m linestyle <path> --json
    python -m linestyle <path> --disable tabs --disable open_parentheses
    python -m linestyle <path> --config linestyle.yaml
    python -m linestyle --list-rules
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

import jsonschema
import yaml

from linestyle import __version__
from linestyle.api import check_paths
from linestyle.core.config import RuleConfig
from linestyle.rules import ALL_RULE_NAMES, RULE_DESCRIPTIONS, RULE_IDS
from linestyle.utils.exit_codes import ExitCode
from linestyle.utils.json_norm import stable_json_dump

_logger = logging.getLogger("linestyle")

# Comma-separated rule names merged into --disable.
DISABLE_ENV = "LINESTYLE_DISABLE"


def _env_disabled() -> list[str]:
    raw = os.getenv(DISABLE_ENV, "")
    return [name.strip() for name in raw.split(",") if name.strip()]


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="linestyle",
        description="Line-oriented style checker for Java sources.",
    )
    p.add_argument(
        "paths",
        nargs="*",
        type=Path,
        help="Files or directories to check (directories are searched for *.java).",
    )
    p.add_argument(
        "--list-rules",
        action="store_true",
        default=False,
        help="List every rule with its ID and description, then exit.",
    )
    p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print the full check result JSON to stdout.",
    )
    p.add_argument(
        "--disable",
        metavar="RULE",
        action="append",
        default=[],
        help=f"Switch a rule off (repeatable). Also read from ${DISABLE_ENV}.",
    )
    p.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file with a 'rules:' mapping of rule name to true/false.",
    )
    p.add_argument(
        "--exclude",
        metavar="DIR",
        action="append",
        default=None,
        help="Directory basename to skip during discovery (repeatable).",
    )
    p.add_argument(
        "--ci",
        "--deterministic",
        dest="ci_mode",
        action="store_true",
        default=False,
        help="Enable deterministic output (fixed timestamp).",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-v info, -vv debug).",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p


def _handle_rules() -> int:
    """Print every rule with its ID and description."""
    for name in ALL_RULE_NAMES:
        print(f"{RULE_IDS[name]:24s}  {name:26s}  {RULE_DESCRIPTIONS[name]}")
    return ExitCode.SUCCESS


def _load_config(args: argparse.Namespace) -> RuleConfig:
    config = RuleConfig.from_yaml(args.config) if args.config else RuleConfig()
    return config.merged(list(args.disable) + _env_disabled())


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (0 = clean, 1 = violations, 2 = error)."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.list_rules:
        return _handle_rules()
    if not args.paths:
        parser.error("the following arguments are required: paths")

    _configure_logging(args.verbose)

    try:
        config = _load_config(args)
    except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR

    try:
        result, result_dict = check_paths(
            args.paths,
            config=config,
            exclude=args.exclude,
            ci_mode=args.ci_mode,
        )
    except FileNotFoundError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR
    except jsonschema.ValidationError as e:
        _logger.error("Check result does not match its schema: %s", e.message)
        return ExitCode.ERROR

    if args.json_out:
        stable_json_dump(result_dict, sys.stdout)
    else:
        for report in result.files:
            for d in report.diagnostics:
                print(f"{report.path}:{d.render()}")
        for err in result.errors:
            print(f"{err.path}: error: {err.error}", file=sys.stderr)

    if result.errors:
        return ExitCode.ERROR
    if result.has_violations:
        return ExitCode.VIOLATION
    return ExitCode.SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
