"""Per-line rules.

Each rule is a plain function taking a ``LineContext`` and returning the
violation message, or None. Rules are independent of each other; the
order of ``LINE_RULES`` only fixes the order of diagnostics within a line.

Rules whose trigger is a fixed literal use ``in`` / ``find`` /
``startswith`` / ``endswith``. Compiled patterns are kept for the few
checks that need them and are anchored, so very long lines scan in
linear time.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cached_property
from typing import Callable, Optional

from linestyle import rules
from linestyle.core.file_kind import CLOSING_PREFIX, FileInfo
from linestyle.core.masking import mask_strings
from linestyle.model.diagnostic import ScanState

_DECORATION_LEAD_RE = re.compile(r"^ *\* *")
_DECORATION_TAIL_RE = re.compile(r" \*/$")
_TRAILING_PUNCT_RE = re.compile(r"[;.,]$")
_SOLE_LINK_RE = re.compile(r"\{@link .*\}")
_PARAM_NO_DESC_RE = re.compile(r"@param +[^ ]++ *+$")
_JIRA_LINK_RE = re.compile(
    r'<a href="https://issues\.apache\.org/jira/browse/CALCITE-[0-9]+">'
    r"\[CALCITE-[0-9]+\]"
)

_ESCAPED_NEWLINE_CLOSE = '\\n"'
_HREF = " href="
_JIRA_KEY = "CALCITE-"


@dataclass(frozen=True)
class LineContext:
    """The line being checked plus what the rules need around it."""

    line: str
    line_no: int
    file: FileInfo
    state: ScanState

    @cached_property
    def masked(self) -> str:
        """The line with string literals masked; computed on first use."""
        return mask_strings(self.line)


RuleCheck = Callable[[LineContext], Optional[str]]


@dataclass(frozen=True, slots=True)
class Rule:
    name: str
    check: RuleCheck

    @property
    def rule_id(self) -> str:
        return rules.RULE_IDS[self.name]


# ── rules ───────────────────────────────────────────────────────────


def check_tabs(ctx: LineContext) -> str | None:
    if "\t" in ctx.line:
        return "Tab"
    return None


def check_duplicate_end(ctx: LineContext) -> str | None:
    if not ctx.line.startswith(CLOSING_PREFIX):
        return None
    if ctx.state.end_marker_seen:
        return "End seen more than once"
    ctx.state.end_marker_seen = True
    return None


def _is_concatenated(line: str, start: int) -> bool:
    """True if ``line[start:]`` is ``+`` followed by more text."""
    n = len(line)
    i = start
    while i < n and line[i].isspace():
        i += 1
    if i >= n or line[i] != "+":
        return False
    i += 1
    while i < n and line[i].isspace():
        i += 1
    return i < n


def check_newline_in_string(ctx: LineContext) -> str | None:
    """A ``\\n`` closing a literal should end the source line too.

    ``"abc\\n" + "def"`` is flagged; ``"abc\\n"`` at end of line and
    ``.append("\\n");`` are not.
    """
    line = ctx.line
    i = line.find(_ESCAPED_NEWLINE_CLOSE)
    while i >= 0:
        if _is_concatenated(line, i + len(_ESCAPED_NEWLINE_CLOSE)):
            return "Newline in string should be at end of line"
        i = line.find(_ESCAPED_NEWLINE_CLOSE, i + 1)
    return None


def check_split_link(ctx: LineContext) -> str | None:
    if "{@link" in ctx.line and "}" not in ctx.line:
        return "Split @link"
    return None


def check_lone_override(ctx: LineContext) -> str | None:
    if ctx.line.endswith("@Override"):
        return "@Override should not be on its own line"
    return None


def check_orphan_paragraph(ctx: LineContext) -> str | None:
    if ctx.line.endswith("<p>") and not ctx.file.is_generated:
        return "Orphan <p>. Make it the first line of a paragraph"
    return None


def strip_decoration(line: str) -> str:
    """Remove comment decoration so a lone ``{@link ...}`` can be recognized."""
    s = _DECORATION_LEAD_RE.sub("", line)
    s = _DECORATION_TAIL_RE.sub("", s)
    s = _TRAILING_PUNCT_RE.sub("", s)
    return s.replace("<li>", "")


def check_javadoc_too_long(ctx: LineContext) -> str | None:
    line = ctx.line
    if "@" not in line or "@see" in line:
        return None
    if len(line) <= ctx.file.max_line_length:
        return None
    # A link that cannot be wrapped is allowed to overflow.
    if _SOLE_LINK_RE.fullmatch(strip_decoration(line)):
        return None
    if ctx.file.is_generated_resource:
        return None
    return f"Javadoc line too long ({len(line)} chars)"


def check_param_without_description(ctx: LineContext) -> str | None:
    if "@param" in ctx.line and _PARAM_NO_DESC_RE.search(ctx.line):
        return "Parameter with no description"
    return None


def check_bad_jira_reference(ctx: LineContext) -> str | None:
    line = ctx.line
    href = line.find(_HREF)
    if href < 0 or line.find(_JIRA_KEY, href + len(_HREF)) < 0:
        return None
    if _JIRA_LINK_RE.search(line):
        return None
    return "Bad JIRA reference"


def _is_identifier_part(c: str) -> bool:
    return c.isalnum() or c == "_" or c == "$"


def open_paren_balance(masked: str) -> int:
    """Call-site opens minus closes over one (already masked) line.

    Only ``(`` directly after an identifier character counts as an open;
    every ``)`` counts as a close.
    """
    balance = 0
    for j, c in enumerate(masked):
        if c == "(":
            if j > 0 and _is_identifier_part(masked[j - 1]):
                balance += 1
        elif c == ")":
            balance -= 1
    return balance


def check_open_parentheses(ctx: LineContext) -> str | None:
    if not ctx.file.is_source:
        return None
    if "(" not in ctx.line and ")" not in ctx.line:
        return None
    if open_paren_balance(ctx.masked) > 1:
        return "Open parentheses exceed closes by 2 or more"
    return None


LINE_RULES: tuple[Rule, ...] = (
    Rule(rules.TABS, check_tabs),
    Rule(rules.DUPLICATE_END, check_duplicate_end),
    Rule(rules.NEWLINE_IN_STRING, check_newline_in_string),
    Rule(rules.SPLIT_LINK, check_split_link),
    Rule(rules.LONE_OVERRIDE, check_lone_override),
    Rule(rules.ORPHAN_PARAGRAPH, check_orphan_paragraph),
    Rule(rules.JAVADOC_TOO_LONG, check_javadoc_too_long),
    Rule(rules.PARAM_WITHOUT_DESCRIPTION, check_param_without_description),
    Rule(rules.BAD_JIRA_REFERENCE, check_bad_jira_reference),
    Rule(rules.OPEN_PARENTHESES, check_open_parentheses),
)

assert tuple(r.name for r in LINE_RULES) == rules.LINE_RULE_NAMES
