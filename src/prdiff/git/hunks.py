"""Hunk parsing for a single ``@@`` block of a file diff."""
from __future__ import annotations

import logging

from prdiff.models import Hunk

logger = logging.getLogger(__name__)

# Closes the range spec: "@@ -6,7 +6,7 @@"
_RANGE_SPEC_END = " @@"


def parse_hunk(block: str, warn_on_parse_error: bool = False) -> Hunk:
    """Parse one hunk block into a :class:`Hunk`.

    ``block`` is the text following a ``@@`` boundary: the range spec, the
    closing `` @@``, then the body. Added/removed lines are picked by their
    first character; context lines and markers like ``\\ No newline at end of
    file`` stay in ``raw_body`` only.

    Args:
        block: Hunk text without its leading ``@@``.
        warn_on_parse_error: If True, log a warning when the closing `` @@``
            is missing.
    """
    end_of_spec = block.find(_RANGE_SPEC_END)
    if end_of_spec == -1:
        if warn_on_parse_error:
            logger.warning("Hunk header has no closing '@@': %r", block[:60])
        range_spec = ""
        raw_body = block
    else:
        range_spec = block[:end_of_spec].strip()
        raw_body = block[end_of_spec + len(_RANGE_SPEC_END):]

    added_lines: list[str] = []
    removed_lines: list[str] = []
    for line in raw_body.split("\n"):
        if line.startswith("+"):
            added_lines.append(line[1:])
        elif line.startswith("-"):
            removed_lines.append(line[1:])

    return Hunk(
        range_spec=range_spec,
        raw_body=raw_body,
        added_lines=tuple(added_lines),
        removed_lines=tuple(removed_lines),
    )
