"""Abstract local storage backend (string keys to string values)."""
from abc import ABC, abstractmethod
from typing import Dict, Optional


class StorageBackend(ABC):
    """Abstract base class for local key/value storage."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return stored value, or None when the key is absent."""
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        pass

    @abstractmethod
    def remove_item(self, key: str) -> bool:
        """Delete key, return True if it existed."""
        pass


class MemoryStorage(StorageBackend):
    """Process-local storage, nothing survives a restart."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove_item(self, key: str) -> bool:
        return self._data.pop(key, None) is not None
