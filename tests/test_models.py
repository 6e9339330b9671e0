"""
Tests for models: configuration validation, records and statistics.
"""
import os
import pytest

from dupfind.core.models import (
    ConfigurationError, Disposition, DupfindParams, EquivalenceGroup, FileRecord, RunStats,
    format_record)


class TestDupfindParams:

    def test_defaults(self):
        params = DupfindParams(paths=["x"])

        assert params.paths == ("x",)
        assert params.disposition == Disposition.LIST
        assert params.include_empty is True
        assert params.hard_links_distinct is False

    def test_requires_an_input_source(self):
        with pytest.raises(ConfigurationError, match="nothing to do"):
            DupfindParams()

    def test_stdin_alone_is_enough(self):
        assert DupfindParams(read_stdin=True).paths == ()

    def test_from_flags_selects_disposition(self):
        assert DupfindParams.from_flags(paths=["x"]).disposition == Disposition.LIST
        assert DupfindParams.from_flags(paths=["x"], link=True).disposition == Disposition.LINK
        assert DupfindParams.from_flags(paths=["x"], delete=True).disposition == Disposition.DELETE

    def test_link_and_delete_rejected(self):
        with pytest.raises(ConfigurationError, match="mutually exclusive"):
            DupfindParams.from_flags(paths=["x"], link=True, delete=True)

    def test_configuration_error_is_a_value_error(self):
        assert issubclass(ConfigurationError, ValueError)

    def test_params_are_immutable(self):
        params = DupfindParams(paths=["x"])
        with pytest.raises(AttributeError):
            params.recurse = True


class TestFileRecord:

    def test_from_stat(self, temp_dir):
        path = temp_dir / "f"
        path.write_bytes(b"12345")
        st = os.lstat(path)

        record = FileRecord.from_stat(str(path), st)

        assert record.size == 5
        assert record.identity == (st.st_dev, st.st_ino)
        assert record.link_count == 1

    def test_format_record(self):
        record = FileRecord(path="/a", size=42)

        assert format_record(record) == "/a"
        assert format_record(record, show_size=True) == "/a (42)"


class TestRunStats:

    def test_record_group_accumulates(self):
        stats = RunStats()
        group = EquivalenceGroup(
            master=FileRecord(path="/a", size=10),
            duplicates=[FileRecord(path="/b", size=10), FileRecord(path="/c", size=10)],
        )

        stats.record_group(group)

        assert stats.groups_found == 1
        assert stats.duplicates_found == 2
        assert stats.duplicate_bytes == 20

    def test_summary_mentions_actions_only_when_they_happened(self):
        stats = RunStats(files_registered=3)
        assert "hard linked" not in stats.print_summary()

        stats.files_linked = 2
        assert "Files hard linked: 2" in stats.print_summary()
