"""Persistent checkpoint of the last evaluated update trigger.

The classifier itself is stateless; this store lets scheduled runs skip
a trigger they already reported. The file is small JSON:

    {
      "last_trigger_time": "2025-10-23T10:30:15",
      "status": "Success",
      "saved_at": "2025-10-23T11:00:02.118+03:00"
    }
"""

import contextlib
import os
import tempfile
from datetime import datetime
from pathlib import Path

import orjson

from medoc_check.domain.types import UpdateOutcome
from medoc_check.exceptions import CheckpointError
from medoc_check.logger import get_logger
from medoc_check.utils.datetime_utils import get_current_datetime_local_iso

logger = get_logger(__name__)


class CheckpointStore:
    """Load and save the checkpoint file.

    A corrupt file is logged, removed and treated as absent so a damaged
    checkpoint can only cause one repeated report, never a stuck monitor.
    """

    def __init__(self, path: Path) -> None:
        """Initialize the store.

        Args:
            path: Location of the checkpoint JSON file

        """
        self.path = path

    def load(self) -> datetime | None:
        """Return the last processed trigger time, or None."""
        if not self.path.exists():
            logger.debug("No checkpoint file at %s", self.path)
            return None

        try:
            data = orjson.loads(self.path.read_bytes())
            checkpoint = datetime.fromisoformat(data["last_trigger_time"])
        except (ValueError, KeyError, TypeError) as e:
            # orjson raises ValueError (JSONDecodeError) for bad JSON
            logger.warning("Checkpoint file corrupted (%s): %s", self.path, e)
            with contextlib.suppress(OSError):
                self.path.unlink()
            return None
        except OSError as e:
            logger.warning("Cannot read checkpoint %s: %s", self.path, e)
            return None

        logger.debug("Loaded checkpoint %s", checkpoint)
        return checkpoint

    def save(self, outcome: UpdateOutcome) -> bool:
        """Record the outcome's trigger time as processed.

        Uses an atomic write (temp file + replace).

        Args:
            outcome: Classified outcome; ignored if it has no trigger time

        Returns:
            True if the checkpoint file was written

        Raises:
            CheckpointError: If the file cannot be written

        """
        if outcome.trigger_time is None:
            return False

        payload = {
            "last_trigger_time": outcome.trigger_time.isoformat(),
            "status": outcome.status.value,
            "saved_at": get_current_datetime_local_iso(),
        }

        temp_path: Path | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="wb",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as temp_file:
                temp_path = Path(temp_file.name)
                temp_file.write(
                    orjson.dumps(payload, option=orjson.OPT_INDENT_2)
                )
            os.replace(temp_path, self.path)
        except OSError as e:
            if temp_path is not None:
                with contextlib.suppress(OSError):
                    temp_path.unlink()
            raise CheckpointError(str(e), target=str(self.path)) from e

        logger.debug(
            "Checkpoint advanced to %s (%s)",
            outcome.trigger_time,
            outcome.status.value,
        )
        return True

    def clear(self) -> bool:
        """Remove the checkpoint file; return whether one existed."""
        try:
            self.path.unlink()
        except FileNotFoundError:
            return False
        logger.info("Checkpoint cleared: %s", self.path)
        return True
