"""Discovery — find Java sources under a directory."""

from __future__ import annotations

from pathlib import Path

from linestyle.core.file_kind import SOURCE_SUFFIX

# VCS, IDE and build-output directories.
SKIPPED_DIRS = frozenset(
    {
        ".git",
        ".github",
        ".idea",
        ".gradle",
        ".mvn",
        "node_modules",
        "target",
        "build",
        "out",
    }
)


def discover_files(
    root: Path,
    *,
    include: list[str] | None = None,
    exclude: list[str] | None = None,
) -> list[Path]:
    """Return the sorted, absolute source files under *root*.

    *include* holds glob patterns (default ``**/*.java``); *exclude* adds
    directory names to ``SKIPPED_DIRS``.
    """
    skipped = SKIPPED_DIRS | set(exclude or [])
    patterns = include or [f"**/*{SOURCE_SUFFIX}"]

    found: set[Path] = set()
    for pattern in patterns:
        for p in root.glob(pattern):
            if skipped.intersection(p.relative_to(root).parts):
                continue
            if p.is_file():
                found.add(p.resolve())
    return sorted(found)
