"""Tests for the DiffParser class."""
from __future__ import annotations

import logging

import pytest

from prdiff.git.diff_parser import DiffParser, parse_diff
from prdiff.models import DiffDocument

_EXPECTED_DEPENDABOT_COUNTS = [(1, 1), (4, 4), (1, 1)]


class TestDependabotDiff:
    """Two-file diff with one and three hunks."""

    def test_two_files(self, diff_parser, dependabot_diff):
        document = diff_parser.parse(dependabot_diff)

        assert isinstance(document, DiffDocument)
        assert document.raw_text == dependabot_diff
        assert len(document.files) == 2

    def test_first_file(self, diff_parser, dependabot_diff):
        first = diff_parser.parse(dependabot_diff).files[0]

        assert first.source_file == first.target_file == "composer/helpers/v2/composer.json"
        assert len(first.hunks) == 1
        assert first.hunks[0].range_spec == "-6,7 +6,7"
        assert first.hunks[0].lines_added == 1
        assert first.hunks[0].lines_removed == 1

    def test_second_file_hunk_counts(self, diff_parser, dependabot_diff):
        second = diff_parser.parse(dependabot_diff).files[1]

        assert second.target_file == "composer/helpers/v2/composer.lock"
        counts = [(h.lines_added, h.lines_removed) for h in second.hunks]
        assert counts == _EXPECTED_DEPENDABOT_COUNTS
        for hunk in second.hunks:
            assert hunk.lines_added == len(hunk.added_lines)
            assert hunk.lines_removed == len(hunk.removed_lines)

    def test_second_file_range_specs(self, diff_parser, dependabot_diff):
        second = diff_parser.parse(dependabot_diff).files[1]

        assert [h.range_spec for h in second.hunks] == [
            "-4,7 +4,7",
            "-2108,16 +2108,16",
            "-2159,7 +2159,7",
        ]

    def test_added_line_content(self, diff_parser, dependabot_diff):
        first = diff_parser.parse(dependabot_diff).files[0]

        assert first.hunks[0].added_lines == ('        "phpstan/phpstan": "~1.7.1"',)
        assert first.hunks[0].removed_lines == ('        "phpstan/phpstan": "~1.6.4"',)


class TestDiffParser:
    """Tests for added/deleted/modified entries and degraded input."""

    def test_parse_new_file(self, diff_parser, sample_diff_output):
        new_file = diff_parser.parse(sample_diff_output).files[0]

        assert new_file.source_file == ""
        assert new_file.target_file == "src/main.py"
        assert new_file.change_type == "added"
        assert new_file.lines_added == 5

    def test_parse_deleted_file(self, diff_parser, sample_diff_output):
        deleted_file = diff_parser.parse(sample_diff_output).files[1]

        assert deleted_file.source_file == "src/utils.py"
        assert deleted_file.target_file == ""
        assert deleted_file.change_type == "deleted"
        assert deleted_file.lines_removed == 3

    def test_parse_modified_file(self, diff_parser, sample_diff_output):
        modified_file = diff_parser.parse(sample_diff_output).files[2]

        assert modified_file.change_type == "modified"
        assert modified_file.hunks[0].added_lines == ("import new_module", "    new_call()")
        assert modified_file.hunks[0].removed_lines == ("    old_call()",)

    def test_pure_rename_has_no_hunks(self, diff_parser):
        raw = (
            "diff --git a/LICENSE b/LICENSE-new\n"
            "similarity index 100%\n"
            "rename from LICENSE\n"
            "rename to LICENSE-new\n"
        )
        file_diff = diff_parser.parse(raw).files[0]

        assert file_diff.source_file == "LICENSE"
        assert file_diff.target_file == "LICENSE-new"
        assert file_diff.hunks == ()
        assert file_diff.change_type == "renamed"

    def test_rename_with_content_change(self, diff_parser):
        raw = (
            "diff --git a/old.py b/new.py\n"
            "similarity index 90%\n"
            "rename from old.py\n"
            "rename to new.py\n"
            "index 1111111..2222222 100644\n"
            "--- a/old.py\n"
            "+++ b/new.py\n"
            "@@ -1,2 +1,2 @@\n"
            " keep\n"
            "-before\n"
            "+after\n"
        )
        file_diff = diff_parser.parse(raw).files[0]

        assert (file_diff.source_file, file_diff.target_file) == ("old.py", "new.py")
        assert len(file_diff.hunks) == 1
        assert file_diff.hunks[0].lines_added == 1

    def test_parse_empty_diff(self, diff_parser):
        document = diff_parser.parse("")

        assert document.files == ()
        assert document.raw_text == ""

    def test_text_without_marker_is_one_unresolved_entry(self, diff_parser):
        document = diff_parser.parse("this is not a diff\n")

        assert len(document.files) == 1
        entry = document.files[0]
        assert entry.source_file is None
        assert entry.target_file is None
        assert entry.change_type == "unknown"
        assert entry.hunks == ()

    def test_malformed_entry_does_not_affect_siblings(self, diff_parser, sample_diff_output):
        document = diff_parser.parse("preamble junk\n" + sample_diff_output)

        assert len(document.files) == 4
        assert document.files[0].change_type == "unknown"
        assert [f.change_type for f in document.files[1:]] == ["added", "deleted", "modified"]

    def test_marker_in_content_splits_entry(self, diff_parser):
        """Textual segmentation treats 'diff --git ' inside content as a boundary."""
        raw = (
            "diff --git a/notes.md b/notes.md\n"
            "--- a/notes.md\n"
            "+++ b/notes.md\n"
            "@@ -1 +1 @@\n"
            "-old\n"
            "+run diff --git a/x b/y to compare\n"
        )
        document = diff_parser.parse(raw)

        assert len(document.files) == 2
        assert document.files[0].hunks[0].added_lines == ("run ",)

    def test_missing_plus_line_resolves_target_independently(self, diff_parser):
        raw = "diff --git a/x.txt b/y.txt\n--- a/x.txt\n"
        file_diff = diff_parser.parse(raw).files[0]

        assert file_diff.source_file == "x.txt"
        assert file_diff.target_file == "y.txt"

    def test_rejects_non_string(self, diff_parser):
        with pytest.raises(TypeError):
            diff_parser.parse(b"diff --git a/x b/x\n")

    def test_parse_is_repeatable(self, diff_parser, dependabot_diff):
        assert diff_parser.parse(dependabot_diff) == diff_parser.parse(dependabot_diff)

    def test_module_level_parse_diff(self, sample_diff_output):
        assert parse_diff(sample_diff_output) == DiffParser().parse(sample_diff_output)


class TestDiffParserWarnings:
    """Tests for parse error logging."""

    def test_warns_on_unresolved_paths(self, caplog):
        caplog.set_level(logging.WARNING, logger="prdiff")
        DiffParser().parse("not a diff")

        assert any("Failed to resolve" in record.message for record in caplog.records)

    def test_warnings_can_be_disabled(self, caplog):
        caplog.set_level(logging.WARNING, logger="prdiff")
        DiffParser(warn_on_parse_error=False).parse("not a diff")

        assert not caplog.records
