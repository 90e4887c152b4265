"""
Key-value storage backends.

Stand-in for the platform preferences store: string values under string
keys. The session aggregate and the auth token live under separate keys.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Backing store could not be read or written."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


@runtime_checkable
class KeyValueStorage(Protocol):
    """Contract for string key-value persistence."""

    def get(self, key: str) -> str | None:
        """Return the stored value or None when the key is absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    def remove(self, key: str) -> None:
        """Delete ``key``. Removing an absent key is a no-op."""
        ...


class MemoryStorage:
    """Dict-backed storage for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)


class JSONFileStorage:
    """
    Storage persisted as one JSON object in a single file.

    Every write rewrites the whole file through a temporary file and an
    atomic rename, so a crash leaves either the old or the new content.
    """

    def __init__(self, path: str | os.PathLike[str]):
        self.path = Path(path).expanduser()

    def _read_all(self, strict: bool = True) -> dict[str, str] | None:
        """
        Parse the whole file.

        Content that is not a JSON object raises StorageError, or with
        ``strict=False`` is logged and reported as None so writers can
        replace it. Unreadable files always raise.
        """
        if not self.path.exists():
            return {}
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Cannot read storage file: {e}", str(self.path)) from e

        if not raw.strip():
            return {}

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            error = StorageError(f"Storage file is not valid JSON: {e}", str(self.path))
            error.__cause__ = e
        else:
            if isinstance(data, dict):
                return data
            error = StorageError("Storage file does not contain a JSON object", str(self.path))

        if strict:
            raise error
        logger.warning(f"Replacing unparseable storage file: {error}")
        return None

    def _write_all(self, data: dict[str, str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                    json.dump(data, tmp, ensure_ascii=False)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"Cannot write storage file: {e}", str(self.path)) from e

        logger.debug(f"Wrote {len(data)} keys to {self.path}")

    def get(self, key: str) -> str | None:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read_all(strict=False) or {}
        data[key] = value
        self._write_all(data)

    def remove(self, key: str) -> None:
        data = self._read_all(strict=False)
        if data is None:
            # Nothing under any key is recoverable
            self._write_all({})
        elif key in data:
            del data[key]
            self._write_all(data)
