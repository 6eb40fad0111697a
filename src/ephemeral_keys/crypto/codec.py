"""Key codec: raw key bytes to and from the tagged ``<base64>.<curve>`` form."""

from __future__ import annotations

from ..errors import KeyDecodeError, UnsupportedCurveError
from .constants import CURVE
from .utils import Base64DecodeError, from_base64, to_base64


def pack_key(raw: bytes) -> str:
    """Encode a raw key as ``base64(raw) + "." + curve``.

    Args:
        raw: The raw key bytes.

    Returns:
        The serialized key text.
    """
    return f"{to_base64(raw)}.{CURVE}"


def unpack_key(text: str) -> bytes:
    """Decode a serialized key produced by :func:`pack_key`.

    The curve tag is checked before any base64 decoding happens.

    Args:
        text: The serialized key text.

    Returns:
        The raw key bytes.

    Raises:
        UnsupportedCurveError: If the trailing tag is not the expected curve.
        KeyDecodeError: If the text is not a string or the body is not valid base64.
    """
    if not isinstance(text, str):
        raise KeyDecodeError(f"Serialized key must be a string, got {type(text).__name__}")

    body, sep, tag = text.rpartition(".")
    if not sep or tag != CURVE:
        raise UnsupportedCurveError("Encountered key with unsupported curve")

    try:
        return from_base64(body)
    except Base64DecodeError as e:
        raise KeyDecodeError(f"Invalid key encoding: {e}") from e
