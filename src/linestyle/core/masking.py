"""String masking — hide the contents of double-quoted literals.

Several rules must not look inside string data; ``"(("`` is not an open
call. ``mask_strings`` replaces the interior of every literal, quotes
included, with the placeholder ``string``.
"""

from __future__ import annotations

PLACEHOLDER = "string"


def mask_strings(line: str) -> str:
    """Return *line* with each double-quoted literal replaced by ``string``.

    Inside a literal a backslash consumes the following character, so
    ``\\"`` does not close it and ``\\\\`` is an inert pair. A literal
    still open at end of line is masked to the end.
    """
    if '"' not in line:
        return line
    parts: list[str] = []
    i = 0
    n = len(line)
    while True:
        j = line.find('"', i)
        if j < 0:
            parts.append(line[i:])
            return "".join(parts)
        parts.append(line[i:j])
        k = j + 1
        while True:
            if k >= n:
                parts.append(PLACEHOLDER)
                return "".join(parts)
            c = line[k]
            k += 1
            if c == "\\":
                k += 1
            elif c == '"':
                parts.append(PLACEHOLDER)
                i = k
                break
