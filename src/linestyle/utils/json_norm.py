"""Canonical JSON serialization for CLI output.

Keys are sorted and the text ends with a newline, so two runs in CI mode
produce byte-identical output.
"""

from __future__ import annotations

import json
from typing import IO, Any


def stable_json_dumps(obj: Any, *, indent: int | None = 2) -> str:
    """Serialize *obj* (plain dicts, lists and scalars) with sorted keys."""
    return json.dumps(obj, indent=indent, sort_keys=True, ensure_ascii=False) + "\n"


def stable_json_dump(obj: Any, fp: IO[str], *, indent: int | None = 2) -> None:
    fp.write(stable_json_dumps(obj, indent=indent))
