"""curve25519 keypair generation and key derivation for ephemeral keys."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF
from nacl.bindings import crypto_scalarmult
from nacl.public import PrivateKey

from .codec import pack_key
from .constants import (
    HKDF_CONTEXT,
    PUBLIC_KEY_SIZE,
    SECRET_KEY_SIZE,
    SECRETBOX_KEY_SIZE,
)


@dataclass
class Keypair:
    """curve25519 keypair.

    Attributes:
        public_key: The public key bytes (32 bytes).
        secret_key: The secret key bytes (32 bytes).
    """

    public_key: bytes
    secret_key: bytes = field(repr=False)

    @property
    def public_key_packed(self) -> str:
        """The public key in serialized ``<base64>.curve25519`` form."""
        return pack_key(self.public_key)


def generate_keypair() -> Keypair:
    """Generate a new curve25519 keypair from the system CSPRNG.

    Returns:
        A new Keypair instance with public and secret keys.
    """
    private_key = PrivateKey.generate()
    return Keypair(
        public_key=bytes(private_key.public_key),
        secret_key=bytes(private_key),
    )


def validate_keypair(keypair: Keypair) -> bool:
    """Validate that a keypair has the correct sizes.

    Args:
        keypair: The keypair to validate.

    Returns:
        True if valid, False otherwise.
    """
    if len(keypair.public_key) != PUBLIC_KEY_SIZE:
        return False
    return len(keypair.secret_key) == SECRET_KEY_SIZE


def shared_secret(secret_key: bytes, public_key: bytes) -> bytes:
    """Compute the X25519 shared secret.

    Args:
        secret_key: Our secret key.
        public_key: The other party's public key.

    Returns:
        The 32-byte shared secret.

    Raises:
        nacl.exceptions.CryptoError: If a key has the wrong size or the
            public key is a low-order point.
    """
    return crypto_scalarmult(secret_key, public_key)


def derive_key(
    shared: bytes,
    ephemeral_public_key: bytes,
    recipient_public_key: bytes,
    context: bytes,
) -> bytes:
    """Derive a secretbox key using HKDF-SHA-512.

    Args:
        shared: The X25519 shared secret.
        ephemeral_public_key: The sender's ephemeral public key.
        recipient_public_key: The recipient's public key.
        context: The context label.

    Returns:
        A 32-byte secretbox key.
    """
    # Salt is SHA-256 of both public keys, sender first
    salt = hashlib.sha256(ephemeral_public_key + recipient_public_key).digest()

    # Info construction: prefix || context_length (4 bytes, big-endian) || context
    prefix = HKDF_CONTEXT.encode("utf-8")
    info = prefix + len(context).to_bytes(4, "big") + context

    hkdf = HKDF(
        algorithm=hashes.SHA512(),
        length=SECRETBOX_KEY_SIZE,
        salt=salt,
        info=info,
    )
    return hkdf.derive(shared)
