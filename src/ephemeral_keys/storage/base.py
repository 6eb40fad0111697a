"""Abstract key-value store interface for ephemeral keys."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

# A stored record, e.g. {"publicKey": "...", "secretKey": "..."}
Record = dict[str, Any]


class KeyValueStore(ABC):
    """Abstract base class for keypair record stores.

    Implementations must make ``put`` and ``delete`` atomic per record: a
    concurrent or interrupted write leaves either the old record, the new
    record or no record, never a partial one. Concurrent writes to the same
    key resolve last-write-wins.
    """

    @abstractmethod
    async def get(self, key: str) -> Record | None:
        """Fetch a record.

        Args:
            key: The store key.

        Returns:
            The record, or None if absent.
        """
        pass  # pragma: no cover

    @abstractmethod
    async def put(self, key: str, value: Record) -> None:
        """Write a record, replacing any existing one.

        Args:
            key: The store key.
            value: The JSON-serializable record.
        """
        pass  # pragma: no cover

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Remove a record.

        Args:
            key: The store key.

        Returns:
            True if a record was removed, False if none existed.
        """
        pass  # pragma: no cover

    async def close(self) -> None:
        """Release any resources held by the store."""
        return None
