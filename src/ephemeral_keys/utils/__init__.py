"""Utility functions for ephemeral keys."""

from .canonical import canonicalize, context_bytes, store_key
from .validation import require_text

__all__ = ["canonicalize", "context_bytes", "require_text", "store_key"]
