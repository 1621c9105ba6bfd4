"""Tests for RuleConfig."""

from __future__ import annotations

from pathlib import Path

import pytest

from linestyle import rules
from linestyle.core.config import DEFAULT_CONFIG, RuleConfig


class TestRuleConfig:
    def test_all_enabled_by_default(self):
        assert all(DEFAULT_CONFIG.to_dict().values())
        assert list(DEFAULT_CONFIG.to_dict()) == list(rules.ALL_RULE_NAMES)
        assert DEFAULT_CONFIG.disabled() == []

    def test_from_disabled(self):
        config = RuleConfig.from_disabled(["tabs", "open_parentheses"])
        assert config.disabled() == ["tabs", "open_parentheses"]
        assert config.is_enabled("split_link")

    def test_unknown_rule_rejected(self):
        with pytest.raises(ValueError, match="unknown rule"):
            RuleConfig.from_disabled(["no_such_rule"])
        with pytest.raises(ValueError, match="unknown rule"):
            DEFAULT_CONFIG.is_enabled("no_such_rule")
        with pytest.raises(ValueError, match="unknown rule"):
            DEFAULT_CONFIG.merged(["no_such_rule"])

    def test_non_bool_rejected(self):
        with pytest.raises(TypeError, match="true or false"):
            RuleConfig.from_mapping({"tabs": "no"})

    def test_duplicate_end_follows_closing_comment(self):
        config = RuleConfig(closing_comment=False)
        assert config.duplicate_end is True
        assert config.is_enabled(rules.DUPLICATE_END) is False

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.tabs = False  # type: ignore[misc]

    def test_merged(self):
        config = RuleConfig(tabs=False).merged(["split_link"])
        assert config.disabled() == ["tabs", "split_link"]


class TestFromYaml:
    def test_rules_table(self, tmp_path: Path):
        path = tmp_path / "linestyle.yaml"
        path.write_text("rules:\n  tabs: false\n  lone_override: true\n", encoding="utf-8")
        config = RuleConfig.from_yaml(path)
        assert config.disabled() == ["tabs"]

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "linestyle.yaml"
        path.write_text("", encoding="utf-8")
        assert RuleConfig.from_yaml(path) == DEFAULT_CONFIG

    def test_bad_layout(self, tmp_path: Path):
        path = tmp_path / "linestyle.yaml"
        path.write_text("rules: [tabs]\n", encoding="utf-8")
        with pytest.raises(ValueError, match="'rules' must be a mapping"):
            RuleConfig.from_yaml(path)

    def test_unknown_rule(self, tmp_path: Path):
        path = tmp_path / "linestyle.yaml"
        path.write_text("rules:\n  tab: false\n", encoding="utf-8")
        with pytest.raises(ValueError, match="unknown rule"):
            RuleConfig.from_yaml(path)
