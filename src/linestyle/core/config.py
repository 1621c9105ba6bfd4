"""Rule configuration — one switch per rule, all on by default."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Iterable, Mapping

import yaml

from linestyle.rules import ALL_RULE_NAMES, DUPLICATE_END


@dataclass(frozen=True)
class RuleConfig:
    """Immutable rule switches, shared read-only across scans.

    The maximum line length is not part of the configuration; it is
    derived from each file's path (see ``core.file_kind``).
    """

    tabs: bool = True
    duplicate_end: bool = True
    newline_in_string: bool = True
    split_link: bool = True
    lone_override: bool = True
    orphan_paragraph: bool = True
    javadoc_too_long: bool = True
    param_without_description: bool = True
    bad_jira_reference: bool = True
    open_parentheses: bool = True
    closing_comment: bool = True

    def is_enabled(self, name: str) -> bool:
        if name not in ALL_RULE_NAMES:
            raise ValueError(f"unknown rule: {name!r}")
        enabled = bool(getattr(self, name))
        # The duplicate-end check belongs to the closing-comment check.
        if name == DUPLICATE_END:
            return enabled and self.closing_comment
        return enabled

    def disabled(self) -> list[str]:
        return [name for name in ALL_RULE_NAMES if not getattr(self, name)]

    def to_dict(self) -> dict[str, bool]:
        return {name: bool(getattr(self, name)) for name in ALL_RULE_NAMES}

    # ── constructors ────────────────────────────────────────────────

    @classmethod
    def from_disabled(cls, names: Iterable[str]) -> "RuleConfig":
        """Build a config with every rule in *names* switched off."""
        return cls.from_mapping({name: False for name in names})

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RuleConfig":
        """Build a config from ``{rule_name: bool}``; missing rules stay on."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(
                f"unknown rule(s): {', '.join(unknown)} "
                f"(known: {', '.join(ALL_RULE_NAMES)})"
            )
        for name, value in data.items():
            if not isinstance(value, bool):
                raise TypeError(f"rule {name!r} must be true or false, got {value!r}")
        return replace(cls(), **dict(data))

    @classmethod
    def from_yaml(cls, path: Path) -> "RuleConfig":
        """Load rule switches from a YAML file.

        Expected layout::

            rules:
              tabs: true
              open_parentheses: false
        """
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{path}: top level must be a mapping")
        rules = data.get("rules") or {}
        if not isinstance(rules, dict):
            raise ValueError(f"{path}: 'rules' must be a mapping")
        return cls.from_mapping(rules)

    def merged(self, other_disabled: Iterable[str]) -> "RuleConfig":
        """Return a copy with the rules in *other_disabled* also switched off."""
        names = list(other_disabled)
        unknown = sorted(set(names) - set(ALL_RULE_NAMES))
        if unknown:
            raise ValueError(f"unknown rule(s): {', '.join(unknown)}")
        return replace(self, **{name: False for name in names})


DEFAULT_CONFIG = RuleConfig()

__all__ = ["RuleConfig", "DEFAULT_CONFIG"]
