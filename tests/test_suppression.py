"""Tests for CHECKSTYLE: OFF / ON suppression regions."""

from __future__ import annotations

from linestyle.core.engine import scan_file
from linestyle.core.suppression import PAUSE_SENTINEL, RESUME_SENTINEL, update_suppression
from linestyle.model.diagnostic import ScanState


class TestUpdateSuppression:
    def test_pause_then_resume(self):
        state = ScanState()
        assert update_suppression(state, "// CHECKSTYLE: OFF") is True
        assert state.suppressed is True
        assert update_suppression(state, "int x;") is False
        assert state.suppressed is True
        assert update_suppression(state, "// CHECKSTYLE: ON") is True
        assert state.suppressed is False

    def test_resume_checked_before_pause(self):
        """With both sentinels on one line, pause wins."""
        state = ScanState()
        update_suppression(state, f"// {RESUME_SENTINEL} {PAUSE_SENTINEL}")
        assert state.suppressed is True

    def test_ordinary_line_leaves_state(self):
        state = ScanState(suppressed=False)
        assert update_suppression(state, "checkstyle: off") is False
        assert state.suppressed is False


class TestSuppressedScan:
    def test_no_diagnostics_inside_region(self):
        lines = [
            "class A {",
            "// CHECKSTYLE: OFF",
            "\tfoo(bar(",
            "  @Override",
            "// CHECKSTYLE: ON",
            "\tint x;",
            "}",
            "// End A.java",
        ]
        rendered = [d.render() for d in scan_file("A.java", lines)]
        assert rendered == ["6: Tab"]

    def test_sentinel_lines_are_not_checked(self):
        lines = [
            "\t// CHECKSTYLE: OFF",
            "\t// CHECKSTYLE: ON  foo(bar(",
            "// End A.java",
        ]
        assert scan_file("A.java", lines) == []

    def test_unterminated_region_still_gets_closing_check(self):
        """The closing-comment rule is file level and ignores suppression."""
        lines = ["// CHECKSTYLE: OFF", "class A {}"]
        rendered = [d.render() for d in scan_file("A.java", lines)]
        assert rendered == ["2: Last line should be '// End A.java'"]

    def test_state_does_not_leak_between_files(self):
        scan_file("A.java", ["// CHECKSTYLE: OFF"])
        rendered = [d.render() for d in scan_file("B.java", ["\tx", "// End B.java"])]
        assert rendered == ["1: Tab"]
