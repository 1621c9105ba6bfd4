"""Engine — scan one file's lines and collect diagnostics.

The only entry point that wires suppression, the per-line rules and the
whole-file rule together. Stateless between calls: each scan builds its
own ``ScanState``.
"""

from __future__ import annotations

import logging
from typing import Sequence

from linestyle import rules
from linestyle.core.config import DEFAULT_CONFIG, RuleConfig
from linestyle.core.file_kind import FileInfo
from linestyle.core.file_rules import check_closing_comment
from linestyle.core.line_rules import LINE_RULES, LineContext
from linestyle.core.suppression import update_suppression
from linestyle.model.diagnostic import Diagnostic, ScanRequest, ScanState

_logger = logging.getLogger(__name__)


def scan_file(
    path: str,
    lines: Sequence[str],
    config: RuleConfig = DEFAULT_CONFIG,
) -> list[Diagnostic]:
    """Check *lines* of the file at *path* and return its diagnostics.

    Diagnostics come back in discovery order: by line, and within a line
    in rule order. The closing-comment diagnostic, if any, is last.

    A ``RecursionError`` is logged with the offending path and re-raised;
    it aborts the run rather than a single line.
    """
    try:
        return _scan(path, lines, config)
    except RecursionError:
        _logger.error("Recursion limit exceeded while checking %s", path)
        raise


def scan_request(request: ScanRequest, config: RuleConfig = DEFAULT_CONFIG) -> list[Diagnostic]:
    return scan_file(request.path, request.lines, config)


def _scan(path: str, lines: Sequence[str], config: RuleConfig) -> list[Diagnostic]:
    info = FileInfo.from_path(path)
    state = ScanState()
    enabled = [rule for rule in LINE_RULES if config.is_enabled(rule.name)]
    diagnostics: list[Diagnostic] = []

    for line_no, line in enumerate(lines, start=1):
        # Sentinel lines and suppressed regions skip every rule, tabs included.
        if update_suppression(state, line) or state.suppressed:
            continue
        ctx = LineContext(line=line, line_no=line_no, file=info, state=state)
        for rule in enabled:
            message = rule.check(ctx)
            if message is not None:
                diagnostics.append(Diagnostic(line_no, message, rule.name))

    if config.is_enabled(rules.CLOSING_COMMENT):
        closing = check_closing_comment(info, lines)
        if closing is not None:
            diagnostics.append(closing)

    _logger.debug("%s: %d line(s), %d diagnostic(s)", path, len(lines), len(diagnostics))
    return diagnostics
