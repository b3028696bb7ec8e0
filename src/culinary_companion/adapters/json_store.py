"""Local JSON-file storage for named blobs."""

import json
import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

_BLOB_NAME = re.compile(r"^[a-z0-9_]+$")

_logger = logging.getLogger(__name__)


class BlobStore(Protocol):
    """Key/value storage of JSON-compatible values."""

    def read(self, name: str) -> object | None:
        """Return the stored value, or None when absent."""

    def write(self, name: str, value: object) -> None:
        """Replace the stored value."""


@dataclass
class JsonFileStore(BlobStore):
    """Stores each blob as ``<directory>/<name>.json``."""

    directory: Path

    def read(self, name: str) -> object | None:
        """Return the decoded blob; missing or corrupt files read as absent."""
        path = self._path(name)
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return None
        except (UnicodeDecodeError, json.JSONDecodeError):
            _logger.warning("Ignoring unreadable blob %s", path)
            return None

    def write(self, name: str, value: object) -> None:
        """Write the blob atomically."""
        path = self._path(name)
        self.directory.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_name(f"{path.name}.tmp")
        temp_path.write_text(json.dumps(value, ensure_ascii=False), encoding="utf-8")
        os.replace(temp_path, path)

    def _path(self, name: str) -> Path:
        if not _BLOB_NAME.match(name):
            raise ValueError(f"Invalid blob name: {name!r}")
        return self.directory / f"{name}.json"
