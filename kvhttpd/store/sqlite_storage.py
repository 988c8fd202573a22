"""
SQLite store backend for persistent storage.
"""
import sqlite3
from pathlib import Path
from kvhttpd.store.base import BaseStore


class SQLiteStore(BaseStore):
    """SQLite store backend for key-value pairs."""

    def __init__(self, db_path: str = "kvhttpd.db"):
        """Initialize SQLite store.

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = db_path
        # Ensure directory exists
        db_file = Path(db_path)
        if db_file.parent != Path("."):
            db_file.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self.db_path, timeout=10)

    def _init_db(self):
        """Initialize database table."""
        conn = self._connect()
        try:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS kv_items (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """)
            conn.commit()
        finally:
            conn.close()

    def get(self, key: str) -> str:
        """Get a value from the store."""
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT value FROM kv_items WHERE key = ?", (key,)
            ).fetchone()
        finally:
            conn.close()

        if row is None:
            return ""
        return row[0]

    def set(self, key: str, value: str) -> None:
        """Put a value into the store."""
        conn = self._connect()
        try:
            conn.execute("""
                INSERT OR REPLACE INTO kv_items (key, value)
                VALUES (?, ?)
            """, (key, value))
            conn.commit()
        finally:
            conn.close()

    def delete(self, key: str) -> None:
        """Delete a key from the store."""
        conn = self._connect()
        try:
            conn.execute("DELETE FROM kv_items WHERE key = ?", (key,))
            conn.commit()
        finally:
            conn.close()
