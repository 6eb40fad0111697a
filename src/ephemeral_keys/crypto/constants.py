"""Cryptographic constants for the ephemeral keys protocol."""

from nacl.public import PrivateKey, PublicKey
from nacl.secret import SecretBox

# Curve tag appended to every serialized key
CURVE = "curve25519"

# HKDF info prefix; the context label is appended after a length field
HKDF_CONTEXT = "ephemeral-keys:box:v1"

# curve25519 key sizes
PUBLIC_KEY_SIZE = PublicKey.SIZE
SECRET_KEY_SIZE = PrivateKey.SIZE

# XSalsa20-Poly1305 (secretbox) constants
SECRETBOX_KEY_SIZE = SecretBox.KEY_SIZE
SECRETBOX_NONCE_SIZE = SecretBox.NONCE_SIZE
SECRETBOX_MAC_SIZE = SecretBox.MACBYTES

# nonce || ephemeral public key || MAC
MIN_CIPHERTEXT_SIZE = SECRETBOX_NONCE_SIZE + PUBLIC_KEY_SIZE + SECRETBOX_MAC_SIZE
