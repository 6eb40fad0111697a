"""Keypair record stores for ephemeral keys."""

from .base import KeyValueStore, Record
from .file_store import FileStore
from .memory import MemoryStore

__all__ = [
    "FileStore",
    "KeyValueStore",
    "MemoryStore",
    "Record",
]
