"""
File-based Key-Value Storage.

Each key is persisted as ``<storage_dir>/<key>.json`` so data survives
process restarts and uvicorn --reload.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

from .base import BaseKeyValueStorage

logger = logging.getLogger(__name__)


class FileKeyValueStorage(BaseKeyValueStorage):
    """JSON file storage backend."""

    def __init__(self, storage_dir: str = "./data"):
        self.storage_dir = Path(storage_dir)
        self.storage_dir.mkdir(parents=True, exist_ok=True)

        logger.info(f"FileKeyValueStorage initialized at {self.storage_dir}")

    @property
    def storage_name(self) -> str:
        """Get the storage backend name."""
        return "file"

    def _get_file(self, key: str) -> Path:
        """Path of the blob for a key"""
        return self.storage_dir / f"{key}.json"

    def load(self, key: str) -> dict[str, Any] | None:
        """Load a blob; None when the file does not exist."""
        file_path = self._get_file(key)
        if not file_path.exists():
            return None

        with open(file_path, encoding="utf-8") as f:
            return json.load(f)

    def save(self, key: str, value: dict[str, Any]) -> None:
        """Write a blob atomically (temp file + rename)."""
        file_path = self._get_file(key)
        tmp_path = file_path.with_suffix(".json.tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(value, f, ensure_ascii=False, indent=2)
        os.replace(tmp_path, file_path)
        logger.debug(f"Saved {key} to {file_path}")

    def delete(self, key: str) -> bool:
        file_path = self._get_file(key)
        if not file_path.exists():
            return False
        file_path.unlink()
        return True

    def exists(self, key: str) -> bool:
        return self._get_file(key).exists()
