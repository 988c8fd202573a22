"""
Base store interface consumed by the HTTP access layer.
"""
from abc import ABC, abstractmethod


class BaseStore(ABC):
    """Three-operation key-value capability.

    Implementations signal failure by raising. A missing key reads back as
    the empty string; there is no separate "not found" state.
    """

    @abstractmethod
    def get(self, key: str) -> str:
        """Get the value for a key, or "" if the key is absent."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Set a key to a value."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Delete a key. Deleting an absent key is not an error."""
        pass
