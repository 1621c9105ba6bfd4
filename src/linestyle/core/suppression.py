"""Suppression regions — ``CHECKSTYLE: OFF`` ... ``CHECKSTYLE: ON``."""

from __future__ import annotations

from linestyle.model.diagnostic import ScanState

RESUME_SENTINEL = "CHECKSTYLE: ON"
PAUSE_SENTINEL = "CHECKSTYLE: OFF"


def update_suppression(state: ScanState, line: str) -> bool:
    """Apply any sentinel in *line* to *state*.

    Resume is checked before pause. Returns True when *line* is a
    sentinel line; such lines are never evaluated by the rules.
    """
    sentinel = False
    if RESUME_SENTINEL in line:
        state.suppressed = False
        sentinel = True
    if PAUSE_SENTINEL in line:
        state.suppressed = True
        sentinel = True
    return sentinel
