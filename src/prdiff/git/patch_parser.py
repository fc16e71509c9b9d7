"""Parser for format-patch style documents (commit metadata + diff body)."""
from __future__ import annotations

import logging

from prdiff.git import scanner
from prdiff.git.diff_parser import DiffParser
from prdiff.models import PatchDocument

logger = logging.getLogger(__name__)


class PatchParser:
    """Split a patch into its commit header and parsed file diffs.

    The header is everything before the first ``diff --git ``: author, date,
    subject, trailers and the stat summary. It is kept verbatim.
    """

    def __init__(self, warn_on_parse_error: bool = True):
        self.diff_parser = DiffParser(warn_on_parse_error=warn_on_parse_error)

    def parse(self, patch_output: str) -> PatchDocument:
        if not isinstance(patch_output, str):
            raise TypeError(
                f"patch text must be str, not {type(patch_output).__name__}"
            )

        split_at = scanner.find_marker(patch_output, scanner.FILE_MARKER)
        if split_at == -1:
            logger.debug("Patch has no file entries; whole text is header")
            return PatchDocument(raw_text=patch_output, header=patch_output)

        files = tuple(self.diff_parser.parse_files(patch_output[split_at:]))
        logger.debug(
            "Parsed patch: %d header chars, %d file(s)", split_at, len(files)
        )
        return PatchDocument(
            raw_text=patch_output,
            header=patch_output[:split_at],
            files=files,
        )


def parse_patch(raw: str, warn_on_parse_error: bool = True) -> PatchDocument:
    """Parse format-patch text. See :meth:`PatchParser.parse`."""
    return PatchParser(warn_on_parse_error=warn_on_parse_error).parse(raw)
