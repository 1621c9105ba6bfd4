"""Path classification: source type, generated files and line width.

All exemptions here are fixed; none of them is configurable.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass

SOURCE_SUFFIX = ".java"

# Generated protocol code and encoding helpers.
GENERATED_SEGMENT = "/proto/"
GENERATED_SUFFIX = "Base64.java"

# Generated resource interface, exempt from the Javadoc length check.
GENERATED_RESOURCE_SUFFIX = "CalciteResource.java"

# Files under this subproject get a wider line budget.
WIDE_SEGMENT = "/calcite/"

DEFAULT_MAX_LINE_LENGTH = 80
WIDE_MAX_LINE_LENGTH = 100

CLOSING_PREFIX = "// End "


def normalize_path(path: str) -> str:
    """Forward slashes, so segment tests work for Windows paths too."""
    return path.replace("\\", "/")


@dataclass(frozen=True, slots=True)
class FileInfo:
    """Everything the rules need to know about the file being scanned."""

    path: str
    name: str
    is_source: bool
    is_generated: bool
    is_generated_resource: bool
    max_line_length: int

    @classmethod
    def from_path(cls, path: str) -> "FileInfo":
        norm = normalize_path(path)
        name = posixpath.basename(norm)
        return cls(
            path=norm,
            name=name,
            is_source=name.endswith(SOURCE_SUFFIX),
            is_generated=GENERATED_SEGMENT in norm or name.endswith(GENERATED_SUFFIX),
            is_generated_resource=name.endswith(GENERATED_RESOURCE_SUFFIX),
            max_line_length=max_line_length_for(norm),
        )

    @property
    def closing_line(self) -> str:
        return CLOSING_PREFIX + self.name


def max_line_length_for(path: str) -> int:
    if WIDE_SEGMENT in normalize_path(path):
        return WIDE_MAX_LINE_LENGTH
    return DEFAULT_MAX_LINE_LENGTH
