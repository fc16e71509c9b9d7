"""Domain entities for prdiff.

Every model is frozen and built in a single parsing pass. Line counts are
always derived from the collected lines, never read from a hunk's range header.
"""
from __future__ import annotations

import re
from typing import Literal

from pydantic import BaseModel, computed_field

ChangeType = Literal["added", "deleted", "renamed", "modified", "unknown"]

_RANGE_SPEC_RE = re.compile(r"^-(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))?$")


class HunkRange(BaseModel):
    """Old/new line ranges declared in a hunk header."""
    old_start: int
    old_count: int
    new_start: int
    new_count: int

    model_config = {"frozen": True}

    @classmethod
    def from_range_spec(cls, range_spec: str) -> HunkRange | None:
        """Parse ``-<start>[,<count>] +<start>[,<count>]``.

        A missing count means 1, as in unified diff. Returns None when the
        text does not have that shape.
        """
        match = _RANGE_SPEC_RE.match(range_spec.strip())
        if match is None:
            return None
        old_start, old_count, new_start, new_count = match.groups()
        return cls(
            old_start=int(old_start),
            old_count=int(old_count) if old_count is not None else 1,
            new_start=int(new_start),
            new_count=int(new_count) if new_count is not None else 1,
        )


class Hunk(BaseModel):
    """One ``@@ <range_spec> @@`` block of a file diff."""
    range_spec: str
    raw_body: str
    added_lines: tuple[str, ...] = ()
    removed_lines: tuple[str, ...] = ()

    model_config = {"frozen": True}

    @computed_field
    @property
    def lines_added(self) -> int:
        return len(self.added_lines)

    @computed_field
    @property
    def lines_removed(self) -> int:
        return len(self.removed_lines)

    @property
    def range(self) -> HunkRange | None:
        """Declared ranges, for anchoring review comments."""
        return HunkRange.from_range_spec(self.range_spec)


class FileDiff(BaseModel):
    """The changes to a single file.

    ``source_file == ""`` marks an added file and ``target_file == ""`` a
    deleted one. ``None`` means the path could not be resolved.
    """
    source_file: str | None
    target_file: str | None
    hunks: tuple[Hunk, ...] = ()

    model_config = {"frozen": True}

    @computed_field
    @property
    def change_type(self) -> ChangeType:
        if self.source_file is None or self.target_file is None:
            return "unknown"
        if self.source_file == "":
            return "added"
        if self.target_file == "":
            return "deleted"
        if self.source_file != self.target_file:
            return "renamed"
        return "modified"

    @property
    def path(self) -> str | None:
        """Path used to label the file: the target, or the source if deleted."""
        if self.target_file:
            return self.target_file
        if self.source_file:
            return self.source_file
        return None

    @computed_field
    @property
    def lines_added(self) -> int:
        return sum(hunk.lines_added for hunk in self.hunks)

    @computed_field
    @property
    def lines_removed(self) -> int:
        return sum(hunk.lines_removed for hunk in self.hunks)


class _FileCollection(BaseModel):
    raw_text: str
    files: tuple[FileDiff, ...] = ()

    model_config = {"frozen": True}

    @property
    def changed_files(self) -> list[str]:
        """Labeling paths of all files, in order, without duplicates."""
        seen: dict[str, None] = {}
        for file_diff in self.files:
            path = file_diff.path
            if path is not None:
                seen.setdefault(path, None)
        return list(seen)

    @property
    def lines_added(self) -> int:
        return sum(file_diff.lines_added for file_diff in self.files)

    @property
    def lines_removed(self) -> int:
        return sum(file_diff.lines_removed for file_diff in self.files)


class DiffDocument(_FileCollection):
    """A parsed unified diff."""


class PatchDocument(_FileCollection):
    """A parsed format-patch document.

    ``header`` holds the commit metadata preceding the first file entry,
    unparsed.
    """
    header: str = ""
