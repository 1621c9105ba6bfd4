"""Tests for the command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from linestyle.__main__ import main
from linestyle.rules import ALL_RULE_NAMES
from linestyle.utils.exit_codes import ExitCode


@pytest.fixture
def clean_file(tmp_path: Path) -> Path:
    path = tmp_path / "Clean.java"
    path.write_text("class Clean {}\n// End Clean.java\n", encoding="utf-8")
    return path


@pytest.fixture
def dirty_file(tmp_path: Path) -> Path:
    path = tmp_path / "Dirty.java"
    path.write_text("class Dirty {\n\tint x;\n}\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _no_env_disable(monkeypatch):
    monkeypatch.delenv("LINESTYLE_DISABLE", raising=False)


class TestExitCodes:
    def test_clean(self, clean_file: Path, capsys):
        assert main([str(clean_file)]) == ExitCode.SUCCESS
        assert capsys.readouterr().out == ""

    def test_violations(self, dirty_file: Path, capsys):
        assert main([str(dirty_file)]) == ExitCode.VIOLATION
        out = capsys.readouterr().out.splitlines()
        assert out == [
            f"{dirty_file.resolve().as_posix()}:2: Tab",
            f"{dirty_file.resolve().as_posix()}:3: Last line should be '// End Dirty.java'",
        ]

    def test_missing_path(self, tmp_path: Path, capsys):
        assert main([str(tmp_path / "nope")]) == ExitCode.ERROR
        assert "does not exist" in capsys.readouterr().err

    def test_unknown_rule(self, dirty_file: Path, capsys):
        assert main([str(dirty_file), "--disable", "nope"]) == ExitCode.ERROR
        assert "unknown rule" in capsys.readouterr().err

    def test_usage_error(self):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 2


class TestConfiguration:
    def test_disable_flags(self, dirty_file: Path):
        argv = [str(dirty_file), "--disable", "tabs", "--disable", "closing_comment"]
        assert main(argv) == ExitCode.SUCCESS

    def test_env_disable(self, dirty_file: Path, monkeypatch):
        monkeypatch.setenv("LINESTYLE_DISABLE", "tabs, closing_comment")
        assert main([str(dirty_file)]) == ExitCode.SUCCESS

    def test_yaml_config(self, dirty_file: Path, tmp_path: Path):
        cfg = tmp_path / "linestyle.yaml"
        cfg.write_text("rules:\n  tabs: false\n  closing_comment: false\n", encoding="utf-8")
        assert main([str(dirty_file), "--config", str(cfg)]) == ExitCode.SUCCESS

    def test_missing_yaml_config(self, dirty_file: Path, tmp_path: Path, capsys):
        assert main([str(dirty_file), "--config", str(tmp_path / "nope.yaml")]) == ExitCode.ERROR
        assert "error:" in capsys.readouterr().err


class TestJsonOutput:
    def test_json(self, dirty_file: Path, capsys):
        assert main([str(dirty_file), "--json", "--ci"]) == ExitCode.VIOLATION
        data = json.loads(capsys.readouterr().out)
        assert data["schema_version"] == "check_result_v1"
        assert data["run"]["created_at"] == "2000-01-01T00:00:00+00:00"
        messages = [d["message"] for d in data["files"][0]["diagnostics"]]
        assert messages == ["Tab", "Last line should be '// End Dirty.java'"]


class TestListRules:
    def test_lists_every_rule(self, capsys):
        assert main(["--list-rules"]) == ExitCode.SUCCESS
        out = capsys.readouterr().out
        for name in ALL_RULE_NAMES:
            assert name in out

    def test_directory_named_rules_is_checked(self, tmp_path: Path, monkeypatch, capsys):
        rules_dir = tmp_path / "rules"
        rules_dir.mkdir()
        (rules_dir / "Dirty.java").write_text("class Dirty {\n\tint x;\n}\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        assert main(["rules"]) == ExitCode.VIOLATION
        assert ":2: Tab" in capsys.readouterr().out
