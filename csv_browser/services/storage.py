from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional
from urllib.parse import quote, unquote

from csv_browser.core.exceptions import PersistenceError


class StorageBackend(ABC):
    """
    Abstract string key/value store for user preferences (memory, local disk, ...).
    Implementations may raise; PreferenceGateway is the layer that swallows failures.
    """

    @abstractmethod
    def read(self, key: str) -> Optional[str]:
        """Return the stored value, or None when the key was never written."""
        pass

    @abstractmethod
    def write(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def keys(self) -> List[str]:
        pass


class InMemoryStorage(StorageBackend):
    """
    Per-instance dict store. Two instances never share state, which keeps
    tests and concurrent app instances isolated.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def read(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def write(self, key: str, value: str) -> None:
        self._data[key] = value

    def keys(self) -> List[str]:
        return sorted(self._data)


class LocalFileSystemStorage(StorageBackend):
    """
    One UTF-8 file per key under `root`.

    Keys contain dataset identities (file names), so they are percent-encoded
    into a single path component.
    """

    SUFFIX = ".json"

    def __init__(self, root: Path):
        self.root = Path(root).resolve()
        self.root.mkdir(parents=True, exist_ok=True)

    def _resolve(self, key: str) -> Path:
        # Prevent path traversal
        full_path = (self.root / (quote(key, safe="") + self.SUFFIX)).resolve()
        if full_path.parent != self.root:
            raise PersistenceError(f"Access denied: {key}")
        return full_path

    def read(self, key: str) -> Optional[str]:
        path = self._resolve(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Failed to read preference '{key}': {e}") from e

    def write(self, key: str, value: str) -> None:
        path = self._resolve(key)
        try:
            path.write_text(value, encoding="utf-8")
        except OSError as e:
            raise PersistenceError(f"Failed to write preference '{key}': {e}") from e

    def keys(self) -> List[str]:
        return sorted(
            unquote(f.name[: -len(self.SUFFIX)])
            for f in self.root.glob(f"*{self.SUFFIX}")
            if f.is_file()
        )
