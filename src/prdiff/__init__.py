"""prdiff - Parse pull request diffs and patches into per-file hunks."""
from prdiff.git import DiffParser, PatchParser, parse_diff, parse_patch
from prdiff.models import DiffDocument, FileDiff, Hunk, HunkRange, PatchDocument

__version__ = "0.1.0"

__all__ = [
    "DiffDocument",
    "DiffParser",
    "FileDiff",
    "Hunk",
    "HunkRange",
    "PatchDocument",
    "PatchParser",
    "parse_diff",
    "parse_patch",
]
