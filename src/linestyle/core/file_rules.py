"""Whole-file rules, evaluated once after the last line."""

from __future__ import annotations

from typing import Sequence

from linestyle import rules
from linestyle.core.file_kind import FileInfo
from linestyle.model.diagnostic import Diagnostic


def check_closing_comment(info: FileInfo, lines: Sequence[str]) -> Diagnostic | None:
    """Source files must end with ``// End <file name>``.

    Reported at the last line, or at line 0 for an empty file.
    """
    if not info.is_source or info.is_generated:
        return None
    expected = info.closing_line
    last = lines[-1] if lines else ""
    if last == expected:
        return None
    return Diagnostic(
        line=len(lines),
        message=f"Last line should be '{expected}'",
        rule=rules.CLOSING_COMMENT,
    )
