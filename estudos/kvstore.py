"""A bucketed key-value store kept in an SQLite file."""

from __future__ import annotations

import os
import sqlite3
import sys
from types import TracebackType

DEFAULT_BUCKET = "jobs"
OPEN_TIMEOUT = 1.0


class BucketNotFoundError(LookupError):
    """Raised when a bucket does not exist."""

    def __init__(self, bucket: str) -> None:
        super().__init__("bucket not found")
        self.bucket = bucket


class KeyValueStore:
    """Stores byte payloads under (bucket, key); the ``jobs`` bucket always exists."""

    def __init__(self, database: str | os.PathLike[str] | None = None) -> None:
        self._conn: sqlite3.Connection | None = None
        if database is not None:
            self.open(database)

    def open(self, database: str | os.PathLike[str]) -> None:
        """Open (creating if needed) the database file."""
        try:
            conn = sqlite3.connect(os.fspath(database), timeout=OPEN_TIMEOUT)
        except sqlite3.Error as error:
            raise OSError(f"cannot open database {database}: {error}") from error
        try:
            with conn:
                conn.execute("CREATE TABLE IF NOT EXISTS buckets (name TEXT PRIMARY KEY)")
                conn.execute(
                    "CREATE TABLE IF NOT EXISTS entries ("
                    " bucket TEXT NOT NULL REFERENCES buckets(name),"
                    " key TEXT NOT NULL,"
                    " value BLOB NOT NULL,"
                    " PRIMARY KEY (bucket, key))"
                )
                conn.execute("INSERT OR IGNORE INTO buckets (name) VALUES (?)", (DEFAULT_BUCKET,))
        except sqlite3.Error as error:
            conn.close()
            raise OSError(f"cannot open database {database}: {error}") from error
        self.close()
        self._conn = conn

    def close(self) -> None:
        """Close the database."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    @property
    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RuntimeError("database is not open")
        return self._conn

    def _require_bucket(self, conn: sqlite3.Connection, bucket: str) -> None:
        row = conn.execute("SELECT 1 FROM buckets WHERE name = ?", (bucket,)).fetchone()
        if row is None:
            raise BucketNotFoundError(bucket)

    def update(self, bucket: str, key: str, payload: bytes) -> None:
        """Set the value of ``key`` in ``bucket``."""
        conn = self._connection
        with conn:
            self._require_bucket(conn, bucket)
            conn.execute(
                "INSERT OR REPLACE INTO entries (bucket, key, value) VALUES (?, ?, ?)",
                (bucket, key, bytes(payload)),
            )

    def view(self, bucket: str, key: str) -> bytes | None:
        """Return the value of ``key`` in ``bucket``, or None if the key is absent."""
        conn = self._connection
        self._require_bucket(conn, bucket)
        row = conn.execute(
            "SELECT value FROM entries WHERE bucket = ? AND key = ?", (bucket, key)
        ).fetchone()
        return bytes(row[0]) if row is not None else None

    def __enter__(self) -> KeyValueStore:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else "teste.db"
    try:
        store = KeyValueStore(path)
    except OSError as error:
        print(error)
        return 1
    with store:
        try:
            store.update(DEFAULT_BUCKET, "testKey", b"test 123")
            value = store.view(DEFAULT_BUCKET, "testKey")
        except BucketNotFoundError as error:
            print(error, file=sys.stderr)
            return 1
    print("retorno:", (value or b"").decode("utf-8"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())