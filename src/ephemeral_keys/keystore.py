"""Keystore: persists serialized keypairs under caller-supplied identifiers."""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Awaitable
from typing import Any, TypeVar

from .crypto import Keypair, generate_keypair, pack_key, unpack_key, validate_keypair
from .errors import EphemeralKeysError, KeyDecodeError, KeyPairNotFoundError, StoreError
from .storage import KeyValueStore, Record
from .types import Identifier
from .utils import store_key

logger = logging.getLogger("ephemeral_keys")

T = TypeVar("T")


def _log_id(key: str) -> str:
    """Short digest of a store key, safe to log."""
    return hashlib.sha256(key.encode("utf-8")).hexdigest()[:12]


class Keystore:
    """Persist curve25519 keypairs in a :class:`KeyValueStore`.

    Each identifier maps to one record ``{"publicKey": ..., "secretKey": ...}``
    holding both halves in serialized ``<base64>.curve25519`` form.

    ``generate_and_store`` does not check for an existing record. Two
    concurrent calls for the same identifier race and the later write wins;
    the public key returned to the losing caller can never be unboxed. This
    is accepted last-write-wins behaviour, not a consistency guarantee.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    @property
    def store(self) -> KeyValueStore:
        return self._store

    async def _call(self, operation: Awaitable[T]) -> T:
        try:
            return await operation
        except EphemeralKeysError:
            raise
        except Exception as e:
            raise StoreError(f"Key store failure: {e}") from e

    async def generate_and_store(self, identifier: Identifier) -> str:
        """Generate a fresh keypair and store it under ``identifier``.

        Any existing keypair for the identifier is overwritten.

        Args:
            identifier: Names the keypair.

        Returns:
            The serialized public key.

        Raises:
            ValidationError: If the identifier cannot be canonicalized.
            StoreError: If the store write fails.
        """
        key = store_key(identifier)
        keypair = generate_keypair()
        record: Record = {
            "publicKey": keypair.public_key_packed,
            "secretKey": pack_key(keypair.secret_key),
        }
        await self._call(self._store.put(key, record))
        logger.debug("Stored ephemeral keypair %s", _log_id(key))
        return record["publicKey"]

    async def get(self, identifier: Identifier) -> Keypair:
        """Load and decode the keypair stored under ``identifier``.

        Args:
            identifier: Names the keypair.

        Returns:
            The decoded keypair.

        Raises:
            KeyPairNotFoundError: If no keypair is stored.
            KeyDecodeError: If the stored record is corrupted.
            StoreError: If the store read fails.
        """
        key = store_key(identifier)
        record = await self._call(self._store.get(key))
        if record is None:
            raise KeyPairNotFoundError(f"Key pair not found: {_log_id(key)}")
        return self._decode_record(key, record)

    async def delete(self, identifier: Identifier) -> None:
        """Destroy the keypair stored under ``identifier``.

        Ciphertexts boxed to its public key can never be unboxed afterwards.

        Args:
            identifier: Names the keypair.

        Raises:
            KeyPairNotFoundError: If no keypair is stored.
            StoreError: If the store delete fails.
        """
        key = store_key(identifier)
        removed = await self._call(self._store.delete(key))
        if not removed:
            raise KeyPairNotFoundError(f"Key pair not found: {_log_id(key)}")
        logger.debug("Deleted ephemeral keypair %s", _log_id(key))

    def _decode_record(self, key: str, record: Any) -> Keypair:
        try:
            public_text = record["publicKey"]
            secret_text = record["secretKey"]
        except (KeyError, TypeError) as e:
            logger.warning("Corrupted keypair record %s", _log_id(key))
            raise KeyDecodeError(f"Corrupted keypair record: missing {e}") from e

        try:
            keypair = Keypair(
                public_key=unpack_key(public_text),
                secret_key=unpack_key(secret_text),
            )
        except KeyDecodeError:
            logger.warning("Corrupted keypair record %s", _log_id(key))
            raise

        if not validate_keypair(keypair):
            logger.warning("Corrupted keypair record %s", _log_id(key))
            raise KeyDecodeError("Corrupted keypair record: invalid key length")
        return keypair
