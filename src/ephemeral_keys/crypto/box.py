"""Box/unbox engine and ciphertext wire format.

Wire layout, before text encoding::

    nonce (24) || ephemeral public key (32) || secretbox(MAC (16) || payload)

Text form is ``base64(wire) + ".box"``. The context label is not carried in
the ciphertext; both sides must supply the same one.
"""

from __future__ import annotations

from dataclasses import dataclass

from nacl.exceptions import CryptoError
from nacl.public import PrivateKey
from nacl.secret import SecretBox
from nacl.utils import random

from ..constants import CIPHERTEXT_SUFFIX
from ..errors import (
    DecryptionError,
    InvalidFormatError,
    MalformedCiphertextError,
    ValidationError,
)
from .constants import (
    MIN_CIPHERTEXT_SIZE,
    PUBLIC_KEY_SIZE,
    SECRETBOX_NONCE_SIZE,
)
from .keypair import Keypair, derive_key, shared_secret
from .utils import Base64DecodeError, from_base64, to_base64


@dataclass(frozen=True)
class BoxedMessage:
    """A parsed ciphertext.

    Attributes:
        nonce: The secretbox nonce (24 bytes).
        sender_public_key: The sender's ephemeral public key (32 bytes).
        box: MAC followed by the encrypted payload.
    """

    nonce: bytes
    sender_public_key: bytes
    box: bytes

    def to_bytes(self) -> bytes:
        return self.nonce + self.sender_public_key + self.box


def encrypt_message(recipient_public_key: bytes, message: bytes, context: bytes) -> bytes:
    """Encrypt a message to a recipient public key.

    A fresh ephemeral keypair and a fresh random nonce are used for every call.
    Neither is kept after the call returns.

    Args:
        recipient_public_key: The recipient's curve25519 public key.
        message: The plaintext bytes.
        context: The context label bytes.

    Returns:
        The raw ciphertext ``nonce || ephemeral public key || box``.

    Raises:
        ValidationError: If the recipient key is not a usable curve25519 point.
    """
    if len(recipient_public_key) != PUBLIC_KEY_SIZE:
        raise ValidationError(
            f"Invalid public key length: {len(recipient_public_key)}, expected {PUBLIC_KEY_SIZE}"
        )

    ephemeral = PrivateKey.generate()
    ephemeral_public_key = bytes(ephemeral.public_key)

    try:
        shared = shared_secret(bytes(ephemeral), recipient_public_key)
    except CryptoError as e:
        raise ValidationError("Public key is not a valid curve25519 point") from e

    key = derive_key(shared, ephemeral_public_key, recipient_public_key, context)
    nonce = random(SECRETBOX_NONCE_SIZE)
    box = SecretBox(key).encrypt(message, nonce).ciphertext

    return BoxedMessage(nonce, ephemeral_public_key, box).to_bytes()


def decrypt_message(keypair: Keypair, boxed: BoxedMessage, context: bytes) -> bytes:
    """Decrypt a parsed ciphertext with the recipient keypair.

    Every failure after parsing is reported as the same :class:`DecryptionError`
    so callers cannot tell a wrong key from a tampered box or a wrong context.

    Args:
        keypair: The recipient keypair.
        boxed: The parsed ciphertext.
        context: The context label bytes used when boxing.

    Returns:
        The plaintext bytes.

    Raises:
        DecryptionError: If decryption fails for any reason.
    """
    try:
        shared = shared_secret(keypair.secret_key, boxed.sender_public_key)
        key = derive_key(shared, boxed.sender_public_key, keypair.public_key, context)
        return SecretBox(key).decrypt(boxed.box, boxed.nonce)
    except CryptoError as e:
        raise DecryptionError("Decryption failed") from e


def encode_ciphertext(raw: bytes) -> str:
    """Encode raw ciphertext bytes to the ``<base64>.box`` text form."""
    return to_base64(raw) + CIPHERTEXT_SUFFIX


def parse_ciphertext(text: str) -> BoxedMessage:
    """Parse the ``<base64>.box`` text form into its parts.

    The suffix is checked first, before any decoding.

    Args:
        text: The ciphertext text.

    Returns:
        The parsed ciphertext.

    Raises:
        ValidationError: If ``text`` is not a string.
        InvalidFormatError: If the ``.box`` suffix is missing.
        MalformedCiphertextError: If the body is not base64 or is too short.
    """
    if not isinstance(text, str):
        raise ValidationError("Ciphertext must be a string")

    if not text.endswith(CIPHERTEXT_SUFFIX):
        raise InvalidFormatError(f"Ciphertext must end in {CIPHERTEXT_SUFFIX}")

    try:
        raw = from_base64(text[: -len(CIPHERTEXT_SUFFIX)])
    except Base64DecodeError as e:
        raise MalformedCiphertextError("Invalid ciphertext") from e

    if len(raw) < MIN_CIPHERTEXT_SIZE:
        raise MalformedCiphertextError(
            f"Invalid ciphertext: {len(raw)} bytes, expected at least {MIN_CIPHERTEXT_SIZE}"
        )

    nonce_end = SECRETBOX_NONCE_SIZE
    key_end = nonce_end + PUBLIC_KEY_SIZE
    return BoxedMessage(
        nonce=raw[:nonce_end],
        sender_public_key=raw[nonce_end:key_end],
        box=raw[key_end:],
    )
