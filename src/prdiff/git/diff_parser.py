"""Git diff parser for prdiff.

Turns the text served by a hosting platform's ``.diff`` endpoint (or
``git diff``) into a :class:`~prdiff.models.DiffDocument`. Parsing never
fails on malformed text: a broken file entry degrades to empty hunks or
``None`` paths without affecting its siblings.
"""
from __future__ import annotations

import logging

from prdiff.git import scanner
from prdiff.git.hunks import parse_hunk
from prdiff.git.paths import resolve_paths
from prdiff.models import DiffDocument, FileDiff

logger = logging.getLogger(__name__)


class DiffParser:
    """Parser for git diff output."""

    def __init__(self, warn_on_parse_error: bool = True):
        """Initialize the parser.

        Args:
            warn_on_parse_error: If True, log warnings for file entries whose
                paths cannot be resolved and hunks without a closing ``@@``.
        """
        self.warn_on_parse_error = warn_on_parse_error

    def parse(self, diff_output: str) -> DiffDocument:
        """Parse git diff output into a document of per-file changes."""
        if not isinstance(diff_output, str):
            raise TypeError(
                f"diff text must be str, not {type(diff_output).__name__}"
            )

        files = tuple(self.parse_files(diff_output))
        logger.debug("Parsed diff: %d file(s)", len(files))
        return DiffDocument(raw_text=diff_output, files=files)

    def parse_files(self, diff_output: str) -> list[FileDiff]:
        """Parse every file entry of ``diff_output``, in order."""
        return [
            self.parse_file_entry(segment)
            for segment in scanner.scan(diff_output, scanner.FILE_MARKER)
            if segment
        ]

    def parse_file_entry(self, entry: str) -> FileDiff:
        """Parse one file entry, the text after a ``diff --git `` marker."""
        header_block, *hunk_blocks = scanner.split(entry, scanner.HUNK_MARKER)
        source_file, target_file = resolve_paths(header_block)

        if self.warn_on_parse_error and (source_file is None or target_file is None):
            logger.warning(
                "Failed to resolve file paths of diff entry: %r",
                header_block.split("\n", 1)[0][:60],
            )

        return FileDiff(
            source_file=source_file,
            target_file=target_file,
            hunks=tuple(
                parse_hunk(block, warn_on_parse_error=self.warn_on_parse_error)
                for block in hunk_blocks
            ),
        )


def parse_diff(raw: str, warn_on_parse_error: bool = True) -> DiffDocument:
    """Parse unified diff text. See :meth:`DiffParser.parse`."""
    return DiffParser(warn_on_parse_error=warn_on_parse_error).parse(raw)
