"""Diagnostic — the engine output for a single style violation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScanRequest:
    """One file to scan: its path and its lines, without terminators."""

    path: str
    lines: tuple[str, ...]


@dataclass(slots=True)
class ScanState:
    """Mutable state for one file scan. Never shared between files."""

    suppressed: bool = False
    end_marker_seen: bool = False


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Immutable (line, message) pair produced by a rule.

    ``line`` is 1-based; the closing-comment rule reports line 0 for an
    empty file.
    """

    line: int
    message: str
    rule: str = ""

    def render(self) -> str:
        return f"{self.line}: {self.message}"

    def to_dict(self) -> dict:
        return {
            "line": self.line,
            "message": self.message,
            "rule": self.rule,
        }
