"""Base64 encoding/decoding utilities for the ephemeral keys protocol."""

import base64
import binascii


class Base64DecodeError(ValueError):
    """Raised when a string is not valid standard base64."""


def to_base64(data: bytes) -> str:
    """Encode bytes to standard base64.

    Args:
        data: The bytes to encode.

    Returns:
        Standard base64 string with padding.
    """
    return base64.b64encode(data).decode("ascii")


def from_base64(s: str) -> bytes:
    """Decode a standard base64 string to bytes.

    Unlike :func:`base64.b64decode` with default arguments, characters outside
    the base64 alphabet are rejected instead of silently discarded.

    Args:
        s: The base64 string to decode.

    Returns:
        The decoded bytes.

    Raises:
        Base64DecodeError: If the string is not valid base64.
    """
    try:
        return base64.b64decode(s.encode("ascii"), validate=True)
    except (UnicodeEncodeError, binascii.Error) as e:
        raise Base64DecodeError(f"Invalid base64 data: {e}") from e
