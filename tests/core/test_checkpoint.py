"""Tests for the persistent checkpoint store."""

from datetime import datetime
from pathlib import Path
from unittest.mock import patch

import orjson
import pytest

from medoc_check.core.checkpoint import CheckpointStore
from medoc_check.domain.types import ErrorId, UpdateOutcome, UpdateStatus
from medoc_check.exceptions import CheckpointError

TRIGGER_TIME = datetime(2025, 10, 23, 10, 30, 15)


@pytest.fixture
def store(tmp_path: Path) -> CheckpointStore:
    """Checkpoint store in a not-yet-existing subdirectory."""
    return CheckpointStore(tmp_path / "state" / "checkpoint.json")


def _failed_outcome(trigger_time=TRIGGER_TIME) -> UpdateOutcome:
    return UpdateOutcome.build(
        UpdateStatus.FAILED,
        ErrorId.UPDATE_LOG_MISSING,
        trigger_time=trigger_time,
    )


class TestCheckpointStore:
    """Tests for CheckpointStore load/save/clear."""

    def test_load_missing_file(self, store):
        """Test no file means no checkpoint."""
        assert store.load() is None

    def test_save_then_load(self, store):
        """Test a saved trigger time is loaded back."""
        assert store.save(_failed_outcome()) is True
        assert store.load() == TRIGGER_TIME

        data = orjson.loads(store.path.read_bytes())
        assert data["last_trigger_time"] == "2025-10-23T10:30:15"
        assert data["status"] == "Failed"
        assert "saved_at" in data

    def test_save_leaves_no_temp_files(self, store):
        """Test the atomic write cleans up after itself."""
        store.save(_failed_outcome())
        assert [p.name for p in store.path.parent.iterdir()] == [
            "checkpoint.json"
        ]

    def test_save_without_trigger_time(self, store):
        """Test outcomes without a trigger are not recorded."""
        outcome = UpdateOutcome.build(UpdateStatus.NO_UPDATE, ErrorId.NO_UPDATE)
        assert store.save(outcome) is False
        assert not store.path.exists()

    @pytest.mark.parametrize(
        "content",
        [b"not json", b"{}", b'{"last_trigger_time": "yesterday"}', b"[]"],
    )
    def test_corrupt_file_is_removed(self, store, content):
        """Test a damaged checkpoint is discarded."""
        store.path.parent.mkdir(parents=True)
        store.path.write_bytes(content)
        assert store.load() is None
        assert not store.path.exists()

    def test_save_failure_raises(self, store):
        """Test write errors surface as CheckpointError."""
        with (
            patch("os.replace", side_effect=OSError("disk full")),
            pytest.raises(CheckpointError, match="disk full"),
        ):
            store.save(_failed_outcome())
        assert not store.path.exists()
        assert list(store.path.parent.iterdir()) == []

    def test_clear(self, store):
        """Test clear reports whether a file existed."""
        assert store.clear() is False
        store.save(_failed_outcome())
        assert store.clear() is True
        assert store.load() is None
