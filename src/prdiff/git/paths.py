"""Source/target path recovery for a single file entry of a git diff."""
from __future__ import annotations

from collections.abc import Sequence

DEV_NULL = "/dev/null"

_SOURCE_PREFIX = "--- "
_TARGET_PREFIX = "+++ "
_RENAME_FROM_PREFIX = "rename from "
_RENAME_TO_PREFIX = "rename to "

# Separator between the two paths of "diff --git a/<A> b/<B>"
_GIT_LINE_SEPARATOR = " b/"


def parse_git_diff_line(line: str) -> tuple[str | None, str | None]:
    """Split the paths out of a git diff line, ``diff --git `` already removed.

    The line is ``a/<A> b/<B>``. It is split at the *first* `` b/``, so a
    source path that itself contains `` b/`` is mis-split; there is no way to
    tell the two apart without quoting, and the leftmost split is kept for
    compatibility. Everything after the separator, including any further
    `` b/``, belongs to ``B``.

    Some puzzles around this format:
    https://github.com/go-gitea/gitea/issues/14812#issuecomment-787059880

    Returns:
        ``(A, B)``, or ``(None, None)`` when the line has no separator.
    """
    a_part, separator, b_part = line.partition(_GIT_LINE_SEPARATOR)
    if not separator:
        return None, None
    return a_part.removeprefix("a/"), b_part


def _find_line(lines: Sequence[str], prefix: str) -> str | None:
    for line in lines:
        if line.startswith(prefix):
            return line
    return None


def _unquote(value: str) -> str:
    """Remove the double quotes git puts around paths with special characters.

    Escape sequences inside the quotes (``\\303\\244``) are kept as written.
    """
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value


def _strip_diff_path(value: str, path_prefix: str) -> str:
    value = _unquote(value)
    if value == DEV_NULL:
        return ""
    return value.removeprefix(path_prefix)


def resolve_source(lines: Sequence[str], fallback: str | None = None) -> str | None:
    """Resolve the source path of a file entry.

    Looks for ``--- `` first (``/dev/null`` means a new file and gives ``""``),
    then ``rename from ``, and otherwise returns ``fallback``. The fallback
    covers entries with only mode lines such as ``new file mode``.
    """
    line = _find_line(lines, _SOURCE_PREFIX)
    if line is not None:
        return _strip_diff_path(line[len(_SOURCE_PREFIX):], "a/")

    line = _find_line(lines, _RENAME_FROM_PREFIX)
    if line is not None:
        return _unquote(line[len(_RENAME_FROM_PREFIX):])

    return fallback


def resolve_target(lines: Sequence[str], fallback: str | None = None) -> str | None:
    """Resolve the target path of a file entry.

    Mirrors :func:`resolve_source` with ``+++ `` and ``rename to ``; a
    ``/dev/null`` target means a deleted file and gives ``""``. Only
    target lines are consulted, so a ``---`` line without a matching ``+++``
    leaves the decision to ``rename to`` or the fallback.
    """
    line = _find_line(lines, _TARGET_PREFIX)
    if line is not None:
        return _strip_diff_path(line[len(_TARGET_PREFIX):], "b/")

    line = _find_line(lines, _RENAME_TO_PREFIX)
    if line is not None:
        return _unquote(line[len(_RENAME_TO_PREFIX):])

    return fallback


def resolve_paths(header_block: str) -> tuple[str | None, str | None]:
    """Resolve ``(source_file, target_file)`` from a file entry's header block."""
    lines = header_block.split("\n")
    fallback_a, fallback_b = parse_git_diff_line(lines[0])
    return (
        resolve_source(lines, fallback_a),
        resolve_target(lines, fallback_b),
    )
