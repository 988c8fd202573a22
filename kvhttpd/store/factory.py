"""
Factory function to create store instances based on configuration.
"""
from typing import Optional
from kvhttpd.core.config import Settings
from kvhttpd.store.base import BaseStore
from kvhttpd.store.memory_storage import MemoryStore
from kvhttpd.store.sqlite_storage import SQLiteStore


def create_store(settings: Optional[Settings] = None) -> BaseStore:
    """Create a store instance based on configuration.

    Args:
        settings: Settings to use; read from the environment when omitted.

    Returns:
        BaseStore instance
    """
    settings = settings or Settings.from_env()

    if settings.storage_type == "sqlite":
        return SQLiteStore(db_path=settings.storage_db_path)
    elif settings.storage_type == "memory":
        return MemoryStore()
    raise ValueError(f"Unknown STORAGE_TYPE: {settings.storage_type!r}")
