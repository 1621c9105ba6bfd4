"""Centralized exit-code contract for all CLI commands.

Code  Meaning
----  -------
  0   Success — no violations detected
  1   Violation — at least one style diagnostic was reported
  2   Error — usage error, missing path, bad configuration
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
