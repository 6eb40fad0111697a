"""Ephemeral keys.

Short-lived curve25519 keypairs for anonymous, context-bound message boxes
with forward secrecy: once a keypair is deleted, nothing boxed to it can be
opened again.

Example:
    ```python
    import asyncio
    from ephemeral_keys import BoxOptions, EphemeralKeysClient

    async def main():
        async with EphemeralKeysClient(path="~/.ssb") as client:
            public_key = await client.generate_and_store("alice")

            ciphertext = await client.box_message(
                "hello", public_key, BoxOptions(context="dark crystal shard")
            )
            plaintext = await client.unbox_message(
                "alice", ciphertext, BoxOptions(context="dark crystal shard")
            )
            print(plaintext.decode("utf-8"))

            await client.delete_keypair("alice")

    asyncio.run(main())
    ```
"""

from .client import EphemeralKeysClient
from .constants import CIPHERTEXT_SUFFIX, DEFAULT_CONTEXT, KEYS_DIRNAME
from .errors import (
    DecryptionError,
    EphemeralKeysError,
    InvalidFormatError,
    KeyDecodeError,
    KeyPairNotFoundError,
    MalformedCiphertextError,
    StoreError,
    UnsupportedCurveError,
    ValidationError,
)
from .keystore import Keystore
from .storage import FileStore, KeyValueStore, MemoryStore
from .types import BoxOptions, ClientConfig, Context, Identifier

__version__ = "1.0.0"

__all__ = [
    # Main classes
    "EphemeralKeysClient",
    "Keystore",
    # Stores
    "KeyValueStore",
    "FileStore",
    "MemoryStore",
    # Constants
    "CIPHERTEXT_SUFFIX",
    "DEFAULT_CONTEXT",
    "KEYS_DIRNAME",
    # Configuration
    "BoxOptions",
    "ClientConfig",
    "Context",
    "Identifier",
    # Errors
    "EphemeralKeysError",
    "ValidationError",
    "KeyDecodeError",
    "UnsupportedCurveError",
    "InvalidFormatError",
    "MalformedCiphertextError",
    "KeyPairNotFoundError",
    "DecryptionError",
    "StoreError",
    # Version
    "__version__",
]
