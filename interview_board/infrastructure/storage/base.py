"""
Abstract Base Class for Key-Value Storage.

Defines the interface for the durable blob stores that back the
interview record store.
"""

from abc import ABC, abstractmethod
from typing import Any


class BaseKeyValueStorage(ABC):
    """Abstract base class for key-value storage backends.

    Each key holds one JSON-serializable document. Implementations
    raise on I/O failure; callers decide how to degrade.
    """

    @abstractmethod
    def load(self, key: str) -> dict[str, Any] | None:
        """Load the document stored under a key.

        Args:
            key: Blob name.

        Returns:
            The stored document, or None if nothing is stored.
        """
        pass

    @abstractmethod
    def save(self, key: str, value: dict[str, Any]) -> None:
        """Replace the document stored under a key.

        Args:
            key: Blob name.
            value: Document to store.
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove a stored document.

        Args:
            key: Blob name.

        Returns:
            True if deleted, False if not found.
        """
        pass

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Check if a document is stored under a key."""
        pass

    def health_check(self) -> bool:
        """Check if the storage is writable.

        Returns:
            True if healthy, False otherwise.
        """
        try:
            test_key = "_health_check_"
            self.save(test_key, {"test": True})
            result = self.load(test_key)
            self.delete(test_key)
            return result is not None
        except Exception:
            return False

    @property
    @abstractmethod
    def storage_name(self) -> str:
        """Get the storage backend name."""
        pass
