"""In-memory store for tests and embedding."""

from __future__ import annotations

import copy

from .base import KeyValueStore, Record


class MemoryStore(KeyValueStore):
    """Dict-backed store. Values are copied in and out."""

    def __init__(self) -> None:
        self._records: dict[str, Record] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, key: object) -> bool:
        return key in self._records

    async def get(self, key: str) -> Record | None:
        record = self._records.get(key)
        return copy.deepcopy(record) if record is not None else None

    async def put(self, key: str, value: Record) -> None:
        self._records[key] = copy.deepcopy(value)

    async def delete(self, key: str) -> bool:
        return self._records.pop(key, None) is not None
