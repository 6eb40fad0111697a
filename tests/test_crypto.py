"""Tests for crypto module."""

import pytest

from ephemeral_keys.crypto import (
    CURVE,
    Keypair,
    derive_key,
    from_base64,
    generate_keypair,
    pack_key,
    shared_secret,
    to_base64,
    unpack_key,
    validate_keypair,
)
from ephemeral_keys.crypto.constants import (
    PUBLIC_KEY_SIZE,
    SECRET_KEY_SIZE,
    SECRETBOX_KEY_SIZE,
)
from ephemeral_keys.crypto.utils import Base64DecodeError
from ephemeral_keys.errors import KeyDecodeError, UnsupportedCurveError


class TestBase64:
    """Tests for standard base64 encoding/decoding."""

    def test_to_base64(self) -> None:
        """Test standard base64 encoding."""
        assert to_base64(b"Hello, World!") == "SGVsbG8sIFdvcmxkIQ=="

    def test_from_base64(self) -> None:
        """Test standard base64 decoding."""
        assert from_base64("SGVsbG8sIFdvcmxkIQ==") == b"Hello, World!"

    def test_rejects_invalid_chars(self) -> None:
        """Test that characters outside the alphabet are rejected."""
        with pytest.raises(Base64DecodeError):
            from_base64("abc!defg")

    def test_rejects_bad_padding(self) -> None:
        """Test that truncated input is rejected."""
        with pytest.raises(Base64DecodeError):
            from_base64("abc")

    def test_rejects_non_ascii(self) -> None:
        """Test that non-ASCII input is rejected."""
        with pytest.raises(Base64DecodeError):
            from_base64("ÿÿÿÿ")


class TestKeyCodec:
    """Tests for the tagged key codec."""

    def test_pack_format(self) -> None:
        """Test that packed keys are base64 followed by the curve tag."""
        packed = pack_key(b"\x00" * 32)
        assert packed == "A" * 43 + "=." + CURVE
        assert packed.endswith(".curve25519")

    def test_round_trip(self) -> None:
        """Test that unpacking a packed key yields the original bytes."""
        keypair = generate_keypair()
        for raw in (keypair.public_key, keypair.secret_key, b"", b"\xff" * 7):
            assert unpack_key(pack_key(raw)) == raw

    def test_rejects_other_curve(self) -> None:
        """Test that a different curve tag is rejected."""
        body = to_base64(b"\x01" * 32)
        with pytest.raises(UnsupportedCurveError, match="unsupported curve"):
            unpack_key(f"{body}.ed25519")

    def test_rejects_missing_tag(self) -> None:
        """Test that a key without any tag is rejected."""
        with pytest.raises(UnsupportedCurveError):
            unpack_key(to_base64(b"\x01" * 32))

    def test_rejects_tag_case_variant(self) -> None:
        """Test that the tag comparison is exact."""
        with pytest.raises(UnsupportedCurveError):
            unpack_key(to_base64(b"\x01" * 32) + ".Curve25519")

    def test_uses_last_segment(self) -> None:
        """Test that only the last dot-separated segment is the tag."""
        with pytest.raises(UnsupportedCurveError):
            unpack_key(to_base64(b"\x01" * 32) + ".curve25519.sha256")

    def test_rejects_bad_base64(self) -> None:
        """Test that a correct tag with a broken body fails to decode."""
        with pytest.raises(KeyDecodeError, match="Invalid key encoding"):
            unpack_key("not*base64.curve25519")

    def test_rejects_non_string(self) -> None:
        """Test that non-string input is rejected."""
        with pytest.raises(KeyDecodeError):
            unpack_key(b"AAAA.curve25519")  # type: ignore[arg-type]

    def test_unsupported_curve_is_decode_error(self) -> None:
        """Test that curve errors can be caught as decode errors."""
        assert issubclass(UnsupportedCurveError, KeyDecodeError)


class TestKeypair:
    """Tests for keypair generation and validation."""

    def test_generate_keypair_sizes(self) -> None:
        """Test that generated keys have curve25519 sizes."""
        keypair = generate_keypair()
        assert len(keypair.public_key) == PUBLIC_KEY_SIZE
        assert len(keypair.secret_key) == SECRET_KEY_SIZE
        assert validate_keypair(keypair)

    def test_generate_keypair_unique(self) -> None:
        """Test that each call yields a new keypair."""
        assert generate_keypair().secret_key != generate_keypair().secret_key

    def test_public_key_packed(self) -> None:
        """Test the packed public key property."""
        keypair = generate_keypair()
        assert unpack_key(keypair.public_key_packed) == keypair.public_key

    def test_secret_key_not_in_repr(self) -> None:
        """Test that the secret key is kept out of repr()."""
        keypair = generate_keypair()
        assert "secret_key" not in repr(keypair)

    def test_validate_rejects_wrong_sizes(self) -> None:
        """Test that wrong key sizes fail validation."""
        assert not validate_keypair(Keypair(public_key=b"\x01" * 31, secret_key=b"\x02" * 32))
        assert not validate_keypair(Keypair(public_key=b"\x01" * 32, secret_key=b"\x02" * 33))

    def test_shared_secret_symmetric(self) -> None:
        """Test that both sides compute the same shared secret."""
        a = generate_keypair()
        b = generate_keypair()
        assert shared_secret(a.secret_key, b.public_key) == shared_secret(
            b.secret_key, a.public_key
        )


class TestDeriveKey:
    """Tests for HKDF key derivation."""

    def setup_method(self) -> None:
        self.shared = b"\x11" * 32
        self.epk = b"\x22" * 32
        self.rpk = b"\x33" * 32

    def test_length(self) -> None:
        """Test that the derived key fits secretbox."""
        key = derive_key(self.shared, self.epk, self.rpk, b"context")
        assert len(key) == SECRETBOX_KEY_SIZE

    def test_deterministic(self) -> None:
        """Test that derivation is deterministic."""
        assert derive_key(self.shared, self.epk, self.rpk, b"ctx") == derive_key(
            self.shared, self.epk, self.rpk, b"ctx"
        )

    def test_context_separates_keys(self) -> None:
        """Test that different contexts produce different keys."""
        assert derive_key(self.shared, self.epk, self.rpk, b"a") != derive_key(
            self.shared, self.epk, self.rpk, b"b"
        )

    def test_empty_context_differs(self) -> None:
        """Test that an empty context is distinct from a non-empty one."""
        assert derive_key(self.shared, self.epk, self.rpk, b"") != derive_key(
            self.shared, self.epk, self.rpk, b"\x00"
        )

    def test_public_keys_bound(self) -> None:
        """Test that swapping the public keys changes the key."""
        assert derive_key(self.shared, self.epk, self.rpk, b"ctx") != derive_key(
            self.shared, self.rpk, self.epk, b"ctx"
        )
