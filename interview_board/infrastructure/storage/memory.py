"""
In-Memory Key-Value Storage Implementation.

Used for tests and throwaway development runs.
"""

import copy
import logging
from typing import Any

from .base import BaseKeyValueStorage

logger = logging.getLogger(__name__)


class InMemoryKeyValueStorage(BaseKeyValueStorage):
    """In-memory storage backend.

    Note: This storage is not persistent and will lose all data on restart.
    Documents are deep-copied on the way in and out, so callers observe
    the same isolation a file backend gives them.
    """

    def __init__(self):
        self._blobs: dict[str, dict[str, Any]] = {}

        logger.info("InMemoryKeyValueStorage initialized")

    @property
    def storage_name(self) -> str:
        """Get the storage backend name."""
        return "memory"

    def load(self, key: str) -> dict[str, Any] | None:
        if key not in self._blobs:
            return None
        return copy.deepcopy(self._blobs[key])

    def save(self, key: str, value: dict[str, Any]) -> None:
        self._blobs[key] = copy.deepcopy(value)
        logger.debug(f"Saved {key} in memory")

    def delete(self, key: str) -> bool:
        if key not in self._blobs:
            return False
        del self._blobs[key]
        return True

    def exists(self, key: str) -> bool:
        return key in self._blobs
