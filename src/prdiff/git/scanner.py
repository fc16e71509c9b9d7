"""Boundary-marker scanner for diff text.

Diffs are segmented on literal markers (``diff --git `` between files and
``\\n@@`` between hunks) rather than by a structural parser. A marker that
happens to occur inside file content is still treated as a boundary, so a
hunk line containing ``diff --git `` or a line starting with ``@@`` splits
the entry at that point. Callers rely on this behavior; keep it.
"""
from __future__ import annotations

from collections.abc import Iterator

FILE_MARKER = "diff --git "
HUNK_MARKER = "\n@@"


def find_marker(text: str, marker: str, start: int = 0) -> int:
    """Return the offset of the next ``marker`` at or after ``start``, or -1."""
    return text.find(marker, start)


def scan(text: str, marker: str) -> Iterator[str]:
    """Yield the segments of ``text`` separated by ``marker``.

    The first segment is whatever precedes the first marker and may be empty.
    N markers always produce N + 1 segments.
    """
    if not marker:
        raise ValueError("marker must be a non-empty string")

    position = 0
    while True:
        offset = find_marker(text, marker, position)
        if offset == -1:
            yield text[position:]
            return
        yield text[position:offset]
        position = offset + len(marker)


def split(text: str, marker: str) -> list[str]:
    """Segments of ``text``, same result as ``text.split(marker)``."""
    return list(scan(text, marker))
