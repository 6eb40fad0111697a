"""Default configuration constants for ephemeral keys."""

# Context label used when the caller does not supply one
DEFAULT_CONTEXT = "SSB Ephemeral key"

# Every ciphertext produced here ends with this literal
CIPHERTEXT_SUFFIX = ".box"

# Directory under the configured path that holds keypair records
KEYS_DIRNAME = "ephemeral-keys"
