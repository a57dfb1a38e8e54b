# src/storage/local_storage.py

"""File-backed string key-value store, the terminal's local storage."""

import json
import logging
from pathlib import Path

from src.config.settings import Settings
from src.models.errors import MalformedPersistedState

logger = logging.getLogger("storefront.storage")


class LocalStorage:
    """String keys to string values, persisted as one JSON object.

    Like browser local storage, values are opaque strings; callers
    encode and decode their own payloads.  An unreadable or corrupt
    file reads as empty and is replaced on the next write.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path: Path = path or Settings.STORAGE_PATH
        logger.debug("LocalStorage initialised, path=%s", self.path)

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning(
                "%s",
                MalformedPersistedState(str(self.path), str(exc)),
            )
            return {}
        if not isinstance(data, dict):
            logger.warning(
                "%s",
                MalformedPersistedState(
                    str(self.path), "top level is not an object"
                ),
            )
            return {}
        return {
            str(k): v for k, v in data.items() if isinstance(v, str)
        }

    def _write_all(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

    def get_item(self, key: str) -> str | None:
        """Return the stored string for *key*, or None if unset."""
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any previous value."""
        data = self._read_all()
        data[key] = value
        self._write_all(data)
        logger.debug("Stored %d chars under '%s'", len(value), key)

    def remove_item(self, key: str) -> None:
        """Delete *key* if present."""
        data = self._read_all()
        if data.pop(key, None) is not None:
            self._write_all(data)
            logger.debug("Removed '%s'", key)

    def keys(self) -> list[str]:
        """All keys currently stored."""
        return list(self._read_all())
