"""EphemeralKeysClient - Main entry point for ephemeral keys."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .constants import DEFAULT_CONTEXT, KEYS_DIRNAME
from .crypto import (
    decrypt_message,
    encode_ciphertext,
    encrypt_message,
    parse_ciphertext,
    unpack_key,
)
from .keystore import Keystore
from .storage import FileStore, KeyValueStore
from .types import BoxOptions, ClientConfig, Identifier
from .utils import context_bytes, require_text


class EphemeralKeysClient:
    """Generate, use and destroy ephemeral curve25519 keypairs.

    Example:
        ```python
        async with EphemeralKeysClient(path="~/.ssb") as client:
            public_key = await client.generate_and_store("alice")
            ciphertext = await client.box_message("hello", public_key)
            plaintext = await client.unbox_message("alice", ciphertext)
            await client.delete_keypair("alice")
        ```
    """

    def __init__(
        self,
        store: KeyValueStore | None = None,
        *,
        path: str | Path | None = None,
        default_context: str = DEFAULT_CONTEXT,
    ) -> None:
        """Initialize the client.

        Args:
            store: Key-value store holding keypair records. Takes precedence
                over ``path``. The caller keeps ownership and closes it.
            path: Base directory. Records are kept in an ``ephemeral-keys``
                directory below it, created if absent.
            default_context: Context label used when an operation omits one.

        Raises:
            ValueError: If neither ``store`` nor ``path`` is given.
            ValidationError: If ``default_context`` is not a string.
        """
        require_text(default_context, "Default context")
        self._config = ClientConfig(
            path=Path(path).expanduser() if path is not None else None,
            default_context=default_context or DEFAULT_CONTEXT,
            keys_dirname=KEYS_DIRNAME,
        )

        if store is None:
            if self._config.path is None:
                raise ValueError("Either a store or a path is required")
            store = FileStore(self._config.path / self._config.keys_dirname)
            self._owns_store = True
        else:
            self._owns_store = False

        self._keystore = Keystore(store)

    async def __aenter__(self) -> EphemeralKeysClient:
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager."""
        await self.close()

    @property
    def keystore(self) -> Keystore:
        return self._keystore

    async def close(self) -> None:
        """Close the store if this client created it.

        An injected store belongs to the caller and is left open.
        """
        if self._owns_store:
            await self._keystore.store.close()

    def _context(self, options: BoxOptions | None) -> bytes:
        context = options.context if options is not None else None
        return context_bytes(context, self._config.default_context)

    async def generate_and_store(self, identifier: Identifier) -> str:
        """Generate a keypair for ``identifier`` and return its public key.

        An existing keypair for the identifier is silently replaced.

        Args:
            identifier: A string or structured value naming the keypair.

        Returns:
            The serialized public key, ``<base64>.curve25519``.
        """
        return await self._keystore.generate_and_store(identifier)

    async def box_message(
        self,
        message: str,
        public_key: str,
        options: BoxOptions | None = None,
    ) -> str:
        """Encrypt a message to a serialized public key.

        Args:
            message: The plaintext.
            public_key: The recipient's serialized public key.
            options: Box options; the context must match the one used to unbox.

        Returns:
            The ciphertext, ``<base64>.box``.

        Raises:
            ValidationError: If an argument has the wrong type or the key is unusable.
            KeyDecodeError: If the public key cannot be decoded.
        """
        require_text(message, "Message")
        require_text(public_key, "Public key")
        recipient_public_key = unpack_key(public_key)
        context = self._context(options)

        raw = encrypt_message(recipient_public_key, message.encode("utf-8"), context)
        return encode_ciphertext(raw)

    async def unbox_message(
        self,
        identifier: Identifier,
        ciphertext: str,
        options: BoxOptions | None = None,
    ) -> bytes:
        """Decrypt a ciphertext with the keypair stored under ``identifier``.

        The ciphertext is fully parsed before the keystore is consulted.

        Args:
            identifier: Names the keypair.
            ciphertext: The ``<base64>.box`` ciphertext.
            options: Box options; the context must match the one used to box.

        Returns:
            The plaintext bytes.

        Raises:
            ValidationError: If an argument has the wrong type.
            InvalidFormatError: If the ciphertext lacks the ``.box`` suffix.
            MalformedCiphertextError: If the ciphertext cannot be parsed.
            KeyPairNotFoundError: If no keypair is stored for the identifier.
            KeyDecodeError: If the stored keypair is corrupted.
            DecryptionError: If decryption fails.
        """
        context = self._context(options)
        boxed = parse_ciphertext(ciphertext)
        keypair = await self._keystore.get(identifier)
        return decrypt_message(keypair, boxed, context)

    async def delete_keypair(self, identifier: Identifier) -> None:
        """Permanently destroy the keypair stored under ``identifier``.

        Args:
            identifier: Names the keypair.

        Raises:
            KeyPairNotFoundError: If no keypair is stored for the identifier.
        """
        await self._keystore.delete(identifier)
