"""Deterministic text forms for identifiers and context labels."""

from __future__ import annotations

import json
import math
from typing import Any

from ..errors import ValidationError


def _check_structured(value: Any, path: str = "$") -> None:
    """Reject anything whose JSON form would not be unique."""
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise ValidationError(
                    f"Object keys must be strings, got {type(key).__name__} at {path}"
                )
            _check_structured(item, f"{path}.{key}")
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _check_structured(item, f"{path}[{index}]")
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise ValidationError(f"Non-finite number at {path}")
    elif value is not None and not isinstance(value, (str, int)):
        raise ValidationError(f"Unsupported type {type(value).__name__} at {path}")


def canonicalize(value: Any) -> str:
    """Return the canonical text form of a string or structured value.

    Strings are returned unchanged. Dicts, lists, tuples and integers are
    serialized as compact JSON with sorted keys.

    Args:
        value: The value to canonicalize.

    Returns:
        The canonical text.

    Raises:
        ValidationError: If the value has no canonical form.
    """
    if isinstance(value, str):
        return value
    if value is None or isinstance(value, bool):
        raise ValidationError(f"Unsupported value: {value!r}")
    if not isinstance(value, (dict, list, tuple, int)):
        raise ValidationError(f"Unsupported type: {type(value).__name__}")

    try:
        _check_structured(value)
        return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    except (RecursionError, ValueError) as e:
        # cyclic or too deeply nested
        raise ValidationError(f"Value has no canonical form: {e}") from e


def store_key(identifier: Any) -> str:
    """Map an identifier to the key it is stored under.

    The type prefix keeps ``"[1]"`` and ``[1]`` apart.

    Args:
        identifier: A string or structured identifier.

    Returns:
        The store key.

    Raises:
        ValidationError: If the identifier is empty or has no canonical form.
    """
    if isinstance(identifier, str):
        if not identifier:
            raise ValidationError("Identifier cannot be empty")
        return "s:" + identifier
    return "j:" + canonicalize(identifier)


def context_bytes(context: Any, default: str) -> bytes:
    """Return the UTF-8 bytes of a context label.

    Args:
        context: The caller's context, or None/empty to use ``default``.
        default: The default context label.

    Returns:
        The context bytes fed into key derivation.

    Raises:
        ValidationError: If the context is not a string or structure, or has
            no canonical form.
    """
    if context is None or context == "":
        context = default
    if not isinstance(context, (str, dict, list, tuple)):
        raise ValidationError(
            f"Context must be a string or structure, got {type(context).__name__}"
        )
    return canonicalize(context).encode("utf-8")
