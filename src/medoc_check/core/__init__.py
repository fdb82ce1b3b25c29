"""Core services: update-run classification and its collaborators.

- classifier: UpdateOperationClassifier and classify_update()
- locator / trigger / reader: pure building blocks used by the classifier
- checkpoint: persisted last-processed trigger time
- token / notify: Telegram delivery of outcome messages
"""

from medoc_check.core.classifier import (
    UpdateOperationClassifier,
    classify_update,
)

__all__ = ["UpdateOperationClassifier", "classify_update"]
