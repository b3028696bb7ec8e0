"""Food log persistence in the local blob store."""

import logging
from dataclasses import dataclass

from culinary_companion.adapters.json_store import BlobStore
from culinary_companion.domain.meals import FoodLogEntry
from culinary_companion.serialization import entry_from_dict, entry_to_dict
from culinary_companion.services.meals import FoodLogRepository

HISTORY_BLOB = "culinary_history"

_logger = logging.getLogger(__name__)


@dataclass
class LocalFoodLogRepository(FoodLogRepository):
    """Blob-backed repository for the food log history."""

    store: BlobStore

    def load(self) -> list[FoodLogEntry]:
        """Return stored entries, skipping rows that cannot be read."""
        data = self.store.read(HISTORY_BLOB)
        if not isinstance(data, list):
            return []
        entries = []
        for row in data:
            if not isinstance(row, dict):
                continue
            try:
                entries.append(entry_from_dict(row))
            except ValueError:
                _logger.warning("Skipping unreadable log entry: id=%s", row.get("id"))
        return entries

    def save(self, entries: list[FoodLogEntry]) -> None:
        """Persist all entries."""
        self.store.write(HISTORY_BLOB, [entry_to_dict(entry) for entry in entries])
