"""Directory-backed store: one JSON document per record."""

from __future__ import annotations

import asyncio
import contextlib
import hashlib
import json
import logging
import os
import tempfile
from pathlib import Path

from ..errors import KeyDecodeError, StoreError
from .base import KeyValueStore, Record

logger = logging.getLogger("ephemeral_keys")

RECORD_SUFFIX = ".json"


class FileStore(KeyValueStore):
    """Store records as JSON files in a dedicated directory.

    File names are the SHA-256 of the store key, so arbitrary identifiers
    never reach the filesystem. Writes go to a temporary file in the same
    directory and are moved into place with :func:`os.replace`.

    Example:
        ```python
        store = FileStore(Path("~/.ssb/ephemeral-keys").expanduser())
        await store.put("s:alice", {"publicKey": "...", "secretKey": "..."})
        ```
    """

    def __init__(self, directory: str | Path) -> None:
        """Initialize the store, creating the directory if absent.

        Args:
            directory: Directory holding record files.

        Raises:
            StoreError: If the directory cannot be created.
        """
        self.directory = Path(directory)
        try:
            self.directory.mkdir(mode=0o700, parents=True, exist_ok=True)
        except OSError as e:
            raise StoreError(f"Cannot create key directory {self.directory}: {e}") from e

    def path_for(self, key: str) -> Path:
        """Return the file path holding ``key``'s record."""
        digest = hashlib.sha256(key.encode("utf-8")).hexdigest()
        return self.directory / f"{digest}{RECORD_SUFFIX}"

    async def get(self, key: str) -> Record | None:
        return await asyncio.to_thread(self._read, self.path_for(key))

    async def put(self, key: str, value: Record) -> None:
        data = json.dumps(value, indent=2)
        await asyncio.to_thread(self._write, self.path_for(key), data)

    async def delete(self, key: str) -> bool:
        return await asyncio.to_thread(self._remove, self.path_for(key))

    def _read(self, path: Path) -> Record | None:
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StoreError(f"Cannot read record {path.name}: {e}") from e

        try:
            record = json.loads(text)
        except json.JSONDecodeError as e:
            logger.warning("Corrupted keypair record %s", path.name)
            raise KeyDecodeError(f"Corrupted keypair record: {e}") from e

        if not isinstance(record, dict):
            logger.warning("Corrupted keypair record %s", path.name)
            raise KeyDecodeError("Corrupted keypair record: not a JSON object")
        return record

    def _write(self, path: Path, data: str) -> None:
        # mkstemp creates the file with mode 0600
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=".tmp-", suffix=RECORD_SUFFIX)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
            self._sync_directory()
        except OSError as e:
            with contextlib.suppress(OSError):
                os.unlink(tmp_name)
            raise StoreError(f"Cannot write record {path.name}: {e}") from e

    def _remove(self, path: Path) -> bool:
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StoreError(f"Cannot delete record {path.name}: {e}") from e
        self._sync_directory()
        return True

    def _sync_directory(self) -> None:
        """Flush directory entries so a rename or unlink survives a crash."""
        if os.name != "posix":
            return
        try:
            fd = os.open(self.directory, os.O_RDONLY)
            try:
                os.fsync(fd)
            finally:
                os.close(fd)
        except OSError as e:
            raise StoreError(f"Cannot sync key directory {self.directory}: {e}") from e
