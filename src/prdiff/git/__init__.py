"""Git diff and patch parsing for prdiff."""
from prdiff.git.diff_parser import DiffParser, parse_diff
from prdiff.git.hunks import parse_hunk
from prdiff.git.patch_parser import PatchParser, parse_patch
from prdiff.git.paths import parse_git_diff_line, resolve_paths

__all__ = [
    "DiffParser",
    "PatchParser",
    "parse_diff",
    "parse_git_diff_line",
    "parse_hunk",
    "parse_patch",
    "resolve_paths",
]
