"""A durable string key-value store standing in for browser local storage."""

import json
import logging
from pathlib import Path

from client import config

logger = logging.getLogger(__name__)


class LocalStorage:
    """Keeps every key in one JSON file and rewrites it on each change.

    Values are strings, like the browser API; callers serialize structured
    data themselves.
    """

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path) if path is not None else config.CLIENT_STORAGE_PATH
        self._items: dict[str, str] = self._load()

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            logger.warning("Ignoring unreadable storage file %s", self.path)
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(key): str(value) for key, value in data.items()}

    def _flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(self._items, ensure_ascii=False, indent=2), encoding="utf-8")
        tmp_path.replace(self.path)

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value
        self._flush()

    def remove_item(self, key: str) -> None:
        if self._items.pop(key, None) is not None:
            self._flush()

    def clear(self) -> None:
        self._items = {}
        self._flush()

    def keys(self) -> list[str]:
        return list(self._items)

    def get_json(self, key: str, default=None):
        raw = self.get_item(key)
        if raw is None:
            return default
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Discarding malformed JSON stored under %s", key)
            self.remove_item(key)
            return default

    def set_json(self, key: str, value) -> None:
        self.set_item(key, json.dumps(value, ensure_ascii=False))
