"""Runner — reads files, drives the engine, builds a CheckResult."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from linestyle.core.config import DEFAULT_CONFIG, RuleConfig
from linestyle.core.discover import discover_files
from linestyle.core.engine import scan_file
from linestyle.model.check_result import CheckResult, FileError, FileReport

_logger = logging.getLogger(__name__)

# Java line terminators only; str.splitlines() also breaks on \f, \x85, U+2028 etc.
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def expand_paths(
    paths: Iterable[Path],
    *,
    include: list[str] | None = None,
    exclude: list[str] | None = None,
) -> list[Path]:
    """Expand directories into their source files; keep files as given.

    Explicitly named files are checked whatever their extension.
    Raises ``FileNotFoundError`` for a path that does not exist.
    """
    files: list[Path] = []
    for p in paths:
        if not p.exists():
            raise FileNotFoundError(f"path does not exist: {p}")
        if p.is_dir():
            files.extend(discover_files(p.resolve(), include=include, exclude=exclude))
        else:
            files.append(p.resolve())
    # De-duplicate, first occurrence wins.
    return list(dict.fromkeys(files))


def split_lines(text: str) -> list[str]:
    """Split *text* on CR, LF and CRLF; one trailing terminator is dropped."""
    if not text:
        return []
    lines = _LINE_BREAK_RE.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def read_lines(path: Path) -> list[str]:
    with path.open(encoding="utf-8", errors="replace", newline="") as fh:
        return split_lines(fh.read())


def run_check(
    paths: Iterable[Path],
    config: RuleConfig = DEFAULT_CONFIG,
    *,
    include: list[str] | None = None,
    exclude: list[str] | None = None,
    _created_at: str | None = None,
) -> CheckResult:
    """Check every file under *paths* and assemble a ``CheckResult``.

    Unreadable files are logged and recorded in ``errors``. A
    ``RecursionError`` from the engine is not caught: it aborts the run.
    """
    files = expand_paths(paths, include=include, exclude=exclude)
    result = CheckResult(config=config.to_dict())
    if _created_at is not None:
        result.created_at = _created_at

    for path in files:
        try:
            lines = read_lines(path)
        except OSError as e:
            _logger.warning("Cannot read %s (%s); skipped", path, e)
            result.errors.append(FileError(path=path.as_posix(), error=str(e)))
            continue
        diagnostics = scan_file(path.as_posix(), lines, config)
        result.files.append(
            FileReport(
                path=path.as_posix(),
                line_count=len(lines),
                diagnostics=tuple(diagnostics),
            )
        )

    _logger.info(
        "Checked %d file(s): %d diagnostic(s), %d error(s)",
        len(result.files),
        result.diagnostic_count,
        len(result.errors),
    )
    return result
