"""Cryptographic operations for the ephemeral keys protocol."""

from .box import (
    BoxedMessage,
    decrypt_message,
    encode_ciphertext,
    encrypt_message,
    parse_ciphertext,
)
from .codec import pack_key, unpack_key
from .constants import CURVE, HKDF_CONTEXT, MIN_CIPHERTEXT_SIZE
from .keypair import (
    Keypair,
    derive_key,
    generate_keypair,
    shared_secret,
    validate_keypair,
)
from .utils import from_base64, to_base64

__all__ = [
    "CURVE",
    "HKDF_CONTEXT",
    "MIN_CIPHERTEXT_SIZE",
    "BoxedMessage",
    "Keypair",
    "decrypt_message",
    "derive_key",
    "encode_ciphertext",
    "encrypt_message",
    "from_base64",
    "generate_keypair",
    "pack_key",
    "parse_ciphertext",
    "shared_secret",
    "to_base64",
    "unpack_key",
    "validate_keypair",
]
