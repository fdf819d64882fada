"""Storage infrastructure - key-value blob backends."""

from .base import BaseKeyValueStorage
from .file import FileKeyValueStorage
from .memory import InMemoryKeyValueStorage

__all__ = ["BaseKeyValueStorage", "FileKeyValueStorage", "InMemoryKeyValueStorage"]
