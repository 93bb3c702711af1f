"""Keyed string storage.

Two implementations of the same synchronous ``get``/``set``/``remove``
contract:

  - FileStorage: durable, one UTF-8 file per key under a base directory
    (stands in for a browser's local storage)
  - MemoryStorage: lives as long as the process (session storage)

Writes that the filesystem rejects raise ``PersistenceFailure``.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Protocol

from nature_near.errors import PersistenceFailure

_SAFE_KEY = re.compile(r"^[A-Za-z0-9._-]+$")


class Storage(Protocol):
    """Persistence collaborator."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStorage:
    """In-process key/value store."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class FileStorage:
    """Stores each key as ``{base}/{key}.json``."""

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir

    def get(self, key: str) -> str | None:
        """Return the stored string, or None if the key was never set."""
        full = self._resolve(key)
        if not full.exists():
            return None
        return full.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        full = self._resolve(key)
        try:
            full.parent.mkdir(parents=True, exist_ok=True)
            tmp = full.with_suffix(".tmp")
            tmp.write_text(value, encoding="utf-8")
            tmp.replace(full)
        except OSError as exc:
            msg = f"Could not write {key!r}: {exc}"
            raise PersistenceFailure(msg) from exc

    def remove(self, key: str) -> None:
        full = self._resolve(key)
        try:
            full.unlink(missing_ok=True)
        except OSError as exc:
            msg = f"Could not remove {key!r}: {exc}"
            raise PersistenceFailure(msg) from exc

    def _resolve(self, key: str) -> Path:
        if not _SAFE_KEY.match(key) or key.startswith("."):
            msg = f"Invalid storage key: {key!r}"
            raise ValueError(msg)
        full = self.base / f"{key}.json"
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Key escapes storage base directory: {key!r}"
            raise ValueError(msg) from None
        return full
