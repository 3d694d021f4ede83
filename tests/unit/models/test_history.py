"""Tests for the SweepRecord model."""

import json

import pytest
from histsweep.models.history import SweepRecord, create_sweep_record


class TestSweepRecord:
    """Tests for SweepRecord validation and serialization."""

    def test_requires_id(self) -> None:
        """An empty ID is rejected."""
        with pytest.raises(ValueError, match="ID"):
            SweepRecord(
                id="",
                timestamp="2026-01-01T00:00:00+00:00",
                profile="minimal",
                roots=("/root",),
                removed=("/root/.viminfo",),
            )

    def test_requires_paths(self) -> None:
        """A record must reference at least one removed or failed path."""
        with pytest.raises(ValueError, match="at least one path"):
            SweepRecord(
                id="abc123def456",
                timestamp="2026-01-01T00:00:00+00:00",
                profile="minimal",
                roots=("/root",),
            )

    def test_success_property(self) -> None:
        """success is False as soon as one path failed."""
        record = create_sweep_record("minimal", ["/root"], [], ["/root/.viminfo"])
        assert record.success is False

    def test_json_line_is_compact(self) -> None:
        """to_json_line produces one compact line that parses back."""
        record = create_sweep_record("minimal", ["/root"], ["/root/.viminfo"], [])
        line = record.to_json_line()

        assert "\n" not in line
        assert json.loads(line)["removed"] == ["/root/.viminfo"]
        assert SweepRecord.from_json_line(line + "\n") == record

    def test_from_dict_defaults(self) -> None:
        """Optional lists and metadata default when absent."""
        record = SweepRecord.from_dict(
            {
                "id": "abc123def456",
                "timestamp": "2026-01-01T00:00:00+00:00",
                "profile": "minimal",
                "roots": ["/root"],
                "failed": ["/root/.lesshst"],
            }
        )
        assert record.removed == ()
        assert record.metadata == {}

    def test_from_dict_missing_field(self) -> None:
        """Missing required fields raise KeyError."""
        with pytest.raises(KeyError):
            SweepRecord.from_dict({"id": "abc123def456"})


class TestCreateSweepRecord:
    """Tests for the create_sweep_record factory."""

    def test_generates_id_and_timestamp(self) -> None:
        """The factory fills in a 12-character ID and a UTC timestamp."""
        record = create_sweep_record(
            "extended",
            ["/home/alice"],
            ["/home/alice/.mysql_history"],
            [],
            metadata={"command": "histsweep sweep"},
        )

        assert len(record.id) == 12
        assert record.timestamp.endswith("+00:00")
        assert record.profile == "extended"
        assert record.metadata == {"command": "histsweep sweep"}

    def test_unique_ids(self) -> None:
        """Each record gets a new ID."""
        a = create_sweep_record("minimal", ["/root"], ["/root/.viminfo"], [])
        b = create_sweep_record("minimal", ["/root"], ["/root/.viminfo"], [])
        assert a.id != b.id

    def test_empty_rejected(self) -> None:
        """A record with no paths cannot be created."""
        with pytest.raises(ValueError, match="no paths"):
            create_sweep_record("minimal", ["/root"], [], [])
