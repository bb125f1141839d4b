"""Local storage abstraction (the session and theme live here)."""

from .backend import MemoryStorage, StorageBackend
from .json_file import JSONFileStorage

__all__ = ['StorageBackend', 'MemoryStorage', 'JSONFileStorage']
