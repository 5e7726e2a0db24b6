"""
Local key-value storage backends.

Each backend stores text blobs under string keys and fully replaces a key's
contents on every write. Backend errors (``sqlite3.Error``, ``OSError``)
propagate; the persistence adapter decides how to report them.
"""

import re
import sqlite3
from pathlib import Path

from fabric_inventory.config import get_logger
from fabric_inventory.core.exceptions import ValidationError
from fabric_inventory.core.interfaces.storage import IKeyValueStorage

logger = get_logger(__name__)

_SAFE_KEY = re.compile(r"[A-Za-z0-9][A-Za-z0-9._-]*")


class InMemoryKeyValueStorage(IKeyValueStorage):
    """Dictionary-backed storage for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._data)


class SQLiteKeyValueStorage(IKeyValueStorage):
    """
    SQLite-backed key-value storage.

    One connection per storage object; every write runs in its own
    transaction, committed on success and rolled back on error.
    """

    def __init__(self, db_path: Path, busy_timeout: int = 30000):
        self.db_path = db_path
        self.busy_timeout = busy_timeout
        self._conn: sqlite3.Connection | None = None

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(self.db_path, timeout=self.busy_timeout / 1000)
            conn.execute("PRAGMA journal_mode=WAL")
            conn.execute("PRAGMA synchronous=NORMAL")
            conn.execute(f"PRAGMA busy_timeout={self.busy_timeout}")
            conn.row_factory = sqlite3.Row
            with conn:
                conn.execute(
                    """
                    CREATE TABLE IF NOT EXISTS kv_store (
                        key TEXT PRIMARY KEY,
                        value TEXT NOT NULL,
                        updated_at TEXT DEFAULT (datetime('now'))
                    )
                    """
                )
            self._conn = conn
            logger.info("kv_storage_opened", db_path=str(self.db_path))
        return self._conn

    def get(self, key: str) -> str | None:
        row = self._connection().execute(
            "SELECT value FROM kv_store WHERE key = ?", (key,)
        ).fetchone()
        return None if row is None else row["value"]

    def set(self, key: str, value: str) -> None:
        conn = self._connection()
        with conn:
            conn.execute(
                """
                INSERT INTO kv_store (key, value, updated_at)
                VALUES (?, ?, datetime('now'))
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (key, value),
            )

    def remove(self, key: str) -> None:
        conn = self._connection()
        with conn:
            conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            logger.info("kv_storage_closed", db_path=str(self.db_path))


class FileKeyValueStorage(IKeyValueStorage):
    """Directory-backed storage: one ``<key>.json`` file per key.

    Keys must already be filename-safe; anything else raises
    ``ValidationError`` so two keys can never share a file.

    Writes go to a temporary sibling file that then replaces the target, so
    a crash mid-write leaves the previous contents intact.
    """

    def __init__(self, directory: Path):
        self.directory = directory

    def _path(self, key: str) -> Path:
        # one file per key, no rewriting
        if not _SAFE_KEY.fullmatch(key):
            raise ValidationError("key", "must match [A-Za-z0-9][A-Za-z0-9._-]*", key)
        return self.directory / f"{key}.json"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        tmp_path = path.with_name(path.name + ".tmp")
        tmp_path.write_text(value, encoding="utf-8")
        tmp_path.replace(path)

    def remove(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)
