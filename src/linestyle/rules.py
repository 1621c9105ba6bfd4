"""Canonical rule registry.

Single source of truth for rule names (the configuration keys) and the
stable rule IDs reported alongside them.

Structure:
  LINE_RULE_NAMES  - per-line rules, in evaluation order
  FILE_RULE_NAMES  - whole-file rules, evaluated after the last line
  ALL_RULE_NAMES   - both, in evaluation order
  RULE_IDS         - rule name -> rule ID
  RULE_DESCRIPTIONS - rule name -> one-line description
"""

from __future__ import annotations

# ── Whitespace ──────────────────────────────────────────────────────
TABS = "tabs"

# ── Closing comment ─────────────────────────────────────────────────
DUPLICATE_END = "duplicate_end"
CLOSING_COMMENT = "closing_comment"

# ── Strings ─────────────────────────────────────────────────────────
NEWLINE_IN_STRING = "newline_in_string"

# ── Javadoc ─────────────────────────────────────────────────────────
SPLIT_LINK = "split_link"
LONE_OVERRIDE = "lone_override"
ORPHAN_PARAGRAPH = "orphan_paragraph"
JAVADOC_TOO_LONG = "javadoc_too_long"
PARAM_WITHOUT_DESCRIPTION = "param_without_description"
BAD_JIRA_REFERENCE = "bad_jira_reference"

# ── Parentheses ─────────────────────────────────────────────────────
OPEN_PARENTHESES = "open_parentheses"

LINE_RULE_NAMES: tuple[str, ...] = (
    TABS,
    DUPLICATE_END,
    NEWLINE_IN_STRING,
    SPLIT_LINK,
    LONE_OVERRIDE,
    ORPHAN_PARAGRAPH,
    JAVADOC_TOO_LONG,
    PARAM_WITHOUT_DESCRIPTION,
    BAD_JIRA_REFERENCE,
    OPEN_PARENTHESES,
)

FILE_RULE_NAMES: tuple[str, ...] = (CLOSING_COMMENT,)

ALL_RULE_NAMES: tuple[str, ...] = LINE_RULE_NAMES + FILE_RULE_NAMES

RULE_IDS: dict[str, str] = {
    TABS: "STY_TAB_001",
    DUPLICATE_END: "STY_END_DUPLICATE_001",
    NEWLINE_IN_STRING: "STY_STRING_NEWLINE_001",
    SPLIT_LINK: "DOC_LINK_SPLIT_001",
    LONE_OVERRIDE: "STY_OVERRIDE_ALONE_001",
    ORPHAN_PARAGRAPH: "DOC_PARAGRAPH_ORPHAN_001",
    JAVADOC_TOO_LONG: "DOC_LINE_LENGTH_001",
    PARAM_WITHOUT_DESCRIPTION: "DOC_PARAM_EMPTY_001",
    BAD_JIRA_REFERENCE: "DOC_JIRA_LINK_001",
    OPEN_PARENTHESES: "STY_PAREN_OPEN_001",
    CLOSING_COMMENT: "STY_END_MISSING_001",
}

RULE_DESCRIPTIONS: dict[str, str] = {
    TABS: "Line contains a tab character",
    DUPLICATE_END: "Closing '// End' comment appears more than once",
    NEWLINE_IN_STRING: "'\\n' inside a string literal is followed by concatenation",
    SPLIT_LINK: "'{@link' is not closed on the same line",
    LONE_OVERRIDE: "@Override annotation on a line of its own",
    ORPHAN_PARAGRAPH: "Line ends with <p> instead of starting a paragraph with it",
    JAVADOC_TOO_LONG: "Line with a Javadoc tag exceeds the maximum line length",
    PARAM_WITHOUT_DESCRIPTION: "@param tag without a description",
    BAD_JIRA_REFERENCE: "JIRA link does not follow the canonical template",
    OPEN_PARENTHESES: "Call-site open parentheses exceed closes by 2 or more",
    CLOSING_COMMENT: "Last line is not '// End <file name>'",
}


def _assert_rule_registry_invariants() -> None:
    """Fail fast on invariant violations.

    Called at import time so CI and local runs catch issues immediately.
    """
    import re

    rule_re = re.compile(r"^[A-Z]{2,4}_[A-Z][A-Z0-9_]*_[0-9]{3}$")

    if len(set(ALL_RULE_NAMES)) != len(ALL_RULE_NAMES):
        raise RuntimeError("Duplicate rule names in registry")
    missing = [n for n in ALL_RULE_NAMES if n not in RULE_IDS or n not in RULE_DESCRIPTIONS]
    if missing:
        raise RuntimeError(f"Rules without ID or description: {missing}")
    extra = sorted(set(RULE_IDS) - set(ALL_RULE_NAMES))
    if extra:
        raise RuntimeError(f"Rule IDs for unknown rules: {extra}")
    bad = [rid for rid in RULE_IDS.values() if not rule_re.match(rid)]
    if bad:
        raise RuntimeError(f"Invalid rule ID format: {bad}")
    if len(set(RULE_IDS.values())) != len(RULE_IDS):
        raise RuntimeError("Duplicate rule IDs in registry")


_assert_rule_registry_invariants()
