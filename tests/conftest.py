"""
Shared fixtures: a recording store double and a client for a fresh app.
"""
from typing import Dict, List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient

from kvhttpd.app import create_app
from kvhttpd.store.base import BaseStore


class RecordingStore(BaseStore):
    """In-memory store that records calls and can be told to fail."""

    def __init__(self) -> None:
        self.m: Dict[str, str] = {}
        self.calls: List[Tuple[str, ...]] = []
        self.fail_on: Optional[str] = None
        self.fail_key: Optional[str] = None

    def _maybe_fail(self, operation: str, key: str) -> None:
        if self.fail_on == operation and self.fail_key in (None, key):
            raise RuntimeError(f"{operation} exploded")

    def get(self, key: str) -> str:
        self.calls.append(("get", key))
        self._maybe_fail("get", key)
        return self.m.get(key, "")

    def set(self, key: str, value: str) -> None:
        self.calls.append(("set", key, value))
        self._maybe_fail("set", key)
        self.m[key] = value

    def delete(self, key: str) -> None:
        self.calls.append(("delete", key))
        self._maybe_fail("delete", key)
        self.m.pop(key, None)


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def client(store: RecordingStore):
    with TestClient(create_app(store)) as test_client:
        yield test_client
