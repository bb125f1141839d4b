"""JSON file storage backend.

All keys live in a single JSON object on disk, rewritten on every change.
Small enough for a session blob and a theme flag.
"""
import json
import logging
from pathlib import Path
from typing import Dict, Optional

from .backend import StorageBackend

logger = logging.getLogger(__name__)


class JSONFileStorage(StorageBackend):
    """Key/value storage in one JSON file."""

    def __init__(self, path: str):
        self.path = Path(path).expanduser()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._data = self._load()

    def _load(self) -> Dict[str, str]:
        if self.path.exists():
            try:
                data = json.loads(self.path.read_text(encoding="utf-8"))
                if isinstance(data, dict):
                    return {str(k): str(v) for k, v in data.items()}
                logger.warning("Storage file %s is not a JSON object, starting fresh", self.path)
            except (json.JSONDecodeError, OSError):
                logger.warning("Corrupted storage file %s, starting fresh", self.path)
        return {}

    def _save(self):
        self.path.write_text(json.dumps(self._data, indent=2), encoding="utf-8")

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value
        self._save()

    def remove_item(self, key: str) -> bool:
        if key not in self._data:
            return False
        del self._data[key]
        self._save()
        return True
