"""Validation utilities for ephemeral keys."""

from __future__ import annotations

from typing import Any

from ..errors import ValidationError


def require_text(value: Any, name: str) -> str:
    """Check that ``value`` is a string.

    Args:
        value: The value to check.
        name: Human-readable name used in the error message.

    Returns:
        The value, unchanged.

    Raises:
        ValidationError: If the value is not a string.
    """
    if not isinstance(value, str):
        raise ValidationError(f"{name} must be a string, got {type(value).__name__}")
    return value
