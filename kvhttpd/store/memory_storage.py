"""
In-memory store backend (default, and for testing).
"""
import threading
from typing import Dict, Optional
from kvhttpd.store.base import BaseStore


class MemoryStore(BaseStore):
    """Dict-backed store, safe for concurrent use."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._store: Dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> str:
        with self._lock:
            return self._store.get(key, "")

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._store[key] = value

    def delete(self, key: str) -> None:
        with self._lock:
            self._store.pop(key, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)
