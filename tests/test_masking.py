"""Tests for string-literal masking."""

from __future__ import annotations

import pytest

from linestyle.core.masking import PLACEHOLDER, mask_strings


class TestMaskStrings:
    """mask_strings replaces each double-quoted literal with ``string``."""

    def test_line_without_quotes_unchanged(self):
        assert mask_strings("xx") == "xx"
        assert mask_strings("") == ""
        assert mask_strings("foo(bar(1), 'c')") == "foo(bar(1), 'c')"

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ('a "bc" d', "a string d"),
            ('"bc" d', "string d"),
            ('a "bc"', "a string"),
            (' String x = "a" + "bc";', " String x = string + string;"),
            ('""', "string"),
        ],
    )
    def test_literals_replaced(self, line: str, expected: str):
        assert mask_strings(line) == expected

    def test_escaped_quote_does_not_close(self):
        assert mask_strings('x = "say \\"hi\\"" + y') == "x = string + y"

    def test_escaped_backslash_before_closing_quote(self):
        """``\\\\"`` closes the literal: the backslashes escape each other."""
        assert mask_strings(' String x = "abc\\\\";') == " String x = string;"

    def test_unterminated_literal_ending_in_backslash(self):
        assert mask_strings(' String x = "abc\\') == " String x = string"

    def test_unterminated_literal_masked_to_end(self):
        assert mask_strings('call("open (((') == "call(string"

    def test_parentheses_inside_literal_hidden(self):
        masked = mask_strings('String.format("CREATE TABLE %s(id integer)", t)));')
        assert masked == "String.format(string, t)));"

    def test_big_string(self):
        line = '      + "a big string ' + "123456" * 1000 + '\\n"'
        assert mask_strings(line) == "      + string"

    def test_big_string_with_escaped_quotes(self):
        line = '      + "a big string ' + '12\\"3456' * 1000 + '\\n"'
        assert mask_strings(line) == "      + string"

    def test_very_long_line_is_linear(self):
        """A 100k-character literal is masked without recursion."""
        line = '"' + "\\\\" * 50_000 + '"'
        assert mask_strings(line) == PLACEHOLDER

    @pytest.mark.parametrize(
        "line",
        [
            'a "bc" d',
            ' String x = "abc\\',
            'p("x\\"y", "z") + "unterminated',
            "no quotes at all",
        ],
    )
    def test_idempotent(self, line: str):
        once = mask_strings(line)
        assert mask_strings(once) == once
        assert '"' not in once
