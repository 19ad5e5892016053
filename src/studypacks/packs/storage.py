"""
Key-value blob storage backends for the pack collection.

Public API:
- KeyValueStorage: protocol with read(key) -> str | None and write(key, value)
- JsonFileStorage(directory): one `<key>.json` file per entry
- MemoryStorage(): dict-backed, nothing touches disk

Backends raise PersistenceReadError / PersistenceWriteError; deciding whether
those are fatal is left to the caller.
"""
from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol

from .errors import PersistenceReadError, PersistenceWriteError


class KeyValueStorage(Protocol):
    def read(self, key: str) -> Optional[str]:
        ...

    def write(self, key: str, value: str) -> None:
        ...


class MemoryStorage:
    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def read(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def write(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStorage:
    """File-per-key storage under a directory.

    Writes go through a temp file in the same directory followed by os.replace,
    so a crash mid-write never leaves a truncated entry behind.
    """

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory).expanduser()

    def path_for(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def read(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceReadError(f"Failed to read {path}: {e}") from e

    def write(self, key: str, value: str) -> None:
        path = self.path_for(key)
        tmp_name: Optional[str] = None
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{key}.", suffix=".tmp", dir=self.directory)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise PersistenceWriteError(f"Failed to write {path}: {e}") from e
