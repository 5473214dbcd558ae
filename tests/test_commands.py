"""
Integration tests for ScanCommand: the orchestration layer used by the CLI.
"""
import pytest

from dupfinder import (
    InvalidSearchDirectory, ScanCommand, ScanParams, SearchStyle)


class TestScanCommand:

    def test_execute_returns_groups_and_stats(self, app_dir, test_tree):
        params = ScanParams(
            root_dir=str(test_tree),
            app_dir=str(app_dir),
            search_style=SearchStyle.BY_CONTENTS,
        )

        command = ScanCommand()
        groups, stats = command.execute(params)

        assert len(groups) == 2
        assert stats.files_scanned == 12
        assert stats.distinct_keys == 6
        assert stats.groups_found == 2
        assert stats.duplicate_files == 8
        assert stats.total_time >= 0
        assert command.finder is not None
        assert command.finder.app_dir == str(app_dir)

    def test_execute_by_size(self, app_dir, test_tree):
        groups, stats = ScanCommand().execute(ScanParams(root_dir=str(test_tree), app_dir=str(app_dir)))

        assert [g.key for g in groups] == ["4"]
        assert stats.duplicate_files == 12

    def test_empty_directory_has_no_groups(self, app_dir, temp_dir):
        empty = temp_dir / "empty"
        empty.mkdir()

        groups, stats = ScanCommand().execute(ScanParams(root_dir=str(empty), app_dir=str(app_dir)))

        assert groups == []
        assert stats.files_scanned == 0

    def test_engine_errors_propagate(self, app_dir, temp_dir):
        params = ScanParams(root_dir=str(temp_dir / "missing"), app_dir=str(app_dir))

        with pytest.raises(InvalidSearchDirectory):
            ScanCommand().execute(params)

    def test_each_execution_uses_a_fresh_index(self, app_dir, test_tree):
        command = ScanCommand()
        params = ScanParams(root_dir=str(test_tree), app_dir=str(app_dir))

        first, _ = command.execute(params)
        second, _ = command.execute(params)

        assert first == second
        assert command.finder.index.file_count() == 12
