"""Type definitions for ephemeral keys."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

from .constants import DEFAULT_CONTEXT, KEYS_DIRNAME

# Structured identifiers and contexts are JSON-compatible trees
StructuredValue = Union[dict[str, Any], list[Any], tuple[Any, ...]]

# Names a keypair record
Identifier = Union[str, int, StructuredValue]

# Label mixed into key derivation
Context = Union[str, StructuredValue]


@dataclass
class ClientConfig:
    """Configuration for EphemeralKeysClient.

    Attributes:
        path: Base directory for the file store, or None when a store is injected.
        default_context: Context label used when an operation omits one.
        keys_dirname: Directory under ``path`` holding keypair records.
    """

    path: Path | None = None
    default_context: str = DEFAULT_CONTEXT
    keys_dirname: str = KEYS_DIRNAME


@dataclass
class BoxOptions:
    """Options for boxing and unboxing a message.

    Attributes:
        context: Context label. None or an empty string selects the client's
            default context. Must be identical on box and unbox.
    """

    context: Context | None = None
