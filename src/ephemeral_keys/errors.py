"""Error hierarchy for ephemeral keys."""

from __future__ import annotations


class EphemeralKeysError(Exception):
    """Base exception for all ephemeral keys errors."""

    pass


class ValidationError(EphemeralKeysError):
    """Input has the wrong type or shape."""

    pass


class KeyDecodeError(EphemeralKeysError):
    """A serialized key or stored keypair record could not be decoded."""

    pass


class UnsupportedCurveError(KeyDecodeError):
    """A serialized key carries a curve tag other than curve25519."""

    pass


class InvalidFormatError(EphemeralKeysError):
    """Ciphertext does not end in the ``.box`` suffix."""

    pass


class MalformedCiphertextError(EphemeralKeysError):
    """Ciphertext body is not base64 or is shorter than the minimum length."""

    pass


class KeyPairNotFoundError(EphemeralKeysError):
    """No keypair is stored under the given identifier."""

    pass


class DecryptionError(EphemeralKeysError):
    """Cryptographic decryption failure.

    Raised with the same message whatever the cause (wrong key, wrong context
    or tampered ciphertext).
    """

    pass


class StoreError(EphemeralKeysError):
    """The persistence layer failed."""

    pass
