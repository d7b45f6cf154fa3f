from __future__ import annotations

import json
import logging
from typing import Any, Optional

from csv_browser.core.exceptions import PersistenceError
from csv_browser.services.storage import StorageBackend

logger = logging.getLogger(__name__)


class PreferenceGateway:
    """
    Soft-failing access to the preference store.

    Neither `get` nor `set` ever raises: storage failures are logged and the
    caller carries on as if `set` succeeded and `get` found nothing.
    """

    def __init__(self, storage: StorageBackend):
        self.storage = storage

    def get(self, key: str) -> Optional[str]:
        try:
            return self.storage.read(key)
        except Exception:
            logger.exception("Failed to read preference", extra={"key": key})
            return None

    def set(self, key: str, value: str) -> None:
        try:
            self.storage.write(key, value)
        except Exception:
            logger.exception("Failed to write preference", extra={"key": key})

    def get_json(self, key: str) -> Optional[Any]:
        """Decoded JSON value, or None when missing, unreadable or corrupt."""
        raw = self.get(key)
        if raw is None:
            return None
        try:
            return decode_preference(key, raw)
        except PersistenceError as e:
            logger.warning("Ignoring corrupt preference", extra={"key": key, "error": str(e)})
            return None

    def set_json(self, key: str, value: Any) -> None:
        self.set(key, json.dumps(value, ensure_ascii=False))


def decode_preference(key: str, raw: str) -> Any:
    try:
        return json.loads(raw)
    except ValueError as e:
        raise PersistenceError(f"Corrupt JSON stored under '{key}': {e}") from e
