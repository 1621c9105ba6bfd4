"""
linestyle.api
=============

Programmatic entrypoints for hosts that embed the checker.

Goals:
  - No argparse / CLI dependencies
  - Deterministic mode support (ci_mode=True)
  - Stable, JSON-friendly outputs that match the bundled schema

Non-goals:
  - Owning exit codes or presentation — callers decide

Usage::

    from linestyle.api import check_lines, check_paths

    messages = check_lines("Foo.java", ["class Foo {", "}"])
    result, result_dict = check_paths(["src/main/java"], ci_mode=True)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Optional, Sequence

from linestyle.contracts.load import validate_instance
from linestyle.core.config import DEFAULT_CONFIG, RuleConfig
from linestyle.core.engine import scan_file
from linestyle.core.runner import run_check
from linestyle.model.check_result import CheckResult

# Fixed timestamp for deterministic mode (matches CLI contract).
_DETERMINISTIC_TIMESTAMP = "2000-01-01T00:00:00+00:00"


def _to_path(p: str | Path) -> Path:
    return p if isinstance(p, Path) else Path(p)


def check_lines(
    path: str,
    lines: Sequence[str],
    *,
    disabled: Iterable[str] = (),
) -> list[str]:
    """Check one in-memory file and return ``"<line>: <message>"`` strings."""
    config = RuleConfig.from_disabled(disabled)
    return [d.render() for d in scan_file(path, lines, config)]


def check_paths(
    paths: Iterable[str | Path],
    *,
    config: Optional[RuleConfig] = None,
    include: Optional[list[str]] = None,
    exclude: Optional[list[str]] = None,
    ci_mode: bool = False,
) -> tuple[CheckResult, dict[str, Any]]:
    """Check files and directories on disk.

    Returns
    -------
    ``(CheckResult, result_dict)``
        The dataclass and the schema-validated JSON dict.

    Raises
    ------
    FileNotFoundError
        If one of *paths* does not exist.
    """
    result = run_check(
        [_to_path(p) for p in paths],
        config or DEFAULT_CONFIG,
        include=include,
        exclude=exclude,
        _created_at=_DETERMINISTIC_TIMESTAMP if ci_mode else None,
    )
    result_dict = result.to_dict()
    validate_instance(result_dict, "check_result.schema.json")
    return result, result_dict
