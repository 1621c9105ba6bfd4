"""CheckResult — the schema-aligned artifact of one checker run."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from linestyle import __version__
from linestyle.model.diagnostic import Diagnostic
from linestyle.rules import RULE_IDS


@dataclass(frozen=True, slots=True)
class FileReport:
    """Diagnostics of a single file, in discovery order."""

    path: str
    line_count: int
    diagnostics: tuple[Diagnostic, ...] = ()

    def rendered(self) -> list[str]:
        return [d.render() for d in self.diagnostics]

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "line_count": self.line_count,
            "diagnostics": [
                {**d.to_dict(), "rule_id": RULE_IDS.get(d.rule, "")}
                for d in self.diagnostics
            ],
        }


@dataclass(frozen=True, slots=True)
class FileError:
    """A file the runner could not read."""

    path: str
    error: str


@dataclass(slots=True)
class CheckResult:
    """Assembled result matching ``check_result.schema.json``.

    Constructed by ``core.runner`` after every file has been checked.
    """

    created_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat(),
    )
    tool_version: str = __version__
    config: dict = field(default_factory=dict)
    files: list[FileReport] = field(default_factory=list)
    errors: list[FileError] = field(default_factory=list)

    @property
    def diagnostic_count(self) -> int:
        return sum(len(f.diagnostics) for f in self.files)

    @property
    def has_violations(self) -> bool:
        return self.diagnostic_count > 0

    def to_dict(self) -> dict[str, Any]:
        """Produce the full result JSON matching the schema."""
        by_rule: dict[str, int] = {}
        for report in self.files:
            for d in report.diagnostics:
                by_rule[d.rule] = by_rule.get(d.rule, 0) + 1

        return {
            "schema_version": "check_result_v1",
            "run": {
                "created_at": self.created_at,
                "tool_version": self.tool_version,
                "config": self.config,
            },
            "summary": {
                "files_checked": len(self.files),
                "files_with_violations": sum(1 for f in self.files if f.diagnostics),
                "diagnostics_total": self.diagnostic_count,
                "by_rule": by_rule,
                "errors_total": len(self.errors),
            },
            "files": [f.to_dict() for f in self.files],
            "errors": [{"path": e.path, "error": e.error} for e in self.errors],
        }
