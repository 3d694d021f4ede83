"""Tests for sweep history recording."""

from pathlib import Path

from histsweep.core.state import StateManager
from histsweep.sweeper.history import record_sweep
from histsweep.sweeper.models import (
    FilePattern,
    Match,
    MatchType,
    RootSweep,
    SweepActionResult,
)


def _result(path: str, **kwargs: object) -> SweepActionResult:
    match = Match(
        path=path,
        root=str(Path(path).parent),
        pattern=FilePattern.exact(Path(path).name),
        path_type=MatchType.FILE,
    )
    return SweepActionResult(match=match, **kwargs)  # type: ignore[arg-type]


class TestRecordSweep:
    """Tests for record_sweep."""

    def test_records_removed_and_failed(self, tmp_path: Path) -> None:
        """Removed and failed paths of all roots go into one record."""
        state = StateManager(state_dir=tmp_path / "state")
        sweeps = [
            RootSweep(
                root="/home/alice",
                results=(
                    _result("/home/alice/.bash_history", success=True),
                    _result("/home/alice/.lesshst", success=False, error="denied"),
                ),
            ),
            RootSweep(root="/root", results=(_result("/root/.viminfo", success=True),)),
        ]

        record = record_sweep(sweeps, profile="minimal", state=state)

        assert record is not None
        assert record.roots == ("/home/alice", "/root")
        assert record.removed == ("/home/alice/.bash_history", "/root/.viminfo")
        assert record.failed == ("/home/alice/.lesshst",)
        assert record.metadata == {"command": "histsweep sweep"}
        assert state.get_history() == [record]

    def test_nothing_to_record(self, tmp_path: Path) -> None:
        """Sweeps without removals or failures are not recorded."""
        state = StateManager(state_dir=tmp_path / "state")
        sweeps = [
            RootSweep(root="/home/alice"),
            RootSweep(
                root="/root",
                results=(_result("/root/.viminfo", success=True, vanished=True),),
            ),
        ]

        assert record_sweep(sweeps, profile="minimal", state=state) is None
        assert not state.history_path.exists()

    def test_default_state_dir(self, isolated_xdg: Path) -> None:
        """Without an explicit StateManager the XDG state directory is used."""
        sweeps = [RootSweep(root="/root", results=(_result("/root/.viminfo", success=True),))]

        record_sweep(sweeps, profile="extended")

        history = isolated_xdg / "state" / "histsweep" / "history.jsonl"
        assert history.exists()
        assert '"profile":"extended"' in history.read_text()
