"""Project-wide constants (chunk size limits, file naming)."""

DEFAULT_SPLIT_SIZE_MB: int = 100
MAX_SPLIT_SIZE_MB: int = 500
BYTES_PER_MB: int = 1024 * 1024
MAX_PARTS: int = 1000

MANIFEST_SUFFIX: str = ".split"
CHUNK_INDEX_WIDTH: int = 3

DIGEST_HEX_LENGTH: int = 40
