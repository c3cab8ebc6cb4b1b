"""Content hashing of binaries."""

import hashlib
import logging

from .constants import DEFAULT_HASH_ALGORITHM, HASH_CHUNK_SIZE
from .exceptions import ContentHashError

logger = logging.getLogger(__name__)


def get_content_hash(path: str, algorithm: str = DEFAULT_HASH_ALGORITHM) -> str:
    """
    Compute the hex digest of a file's contents.

    The file is streamed in fixed-size chunks.

    Args:
        path: Path to file.
        algorithm: Any hashlib algorithm name, MD5 by default.

    Returns:
        Lowercase hexadecimal digest.

    Raises:
        ValueError: If path is empty or the algorithm is unsupported.
        ContentHashError: If the file cannot be read.
    """
    if not path:
        raise ValueError("A binary path is required")

    digest = hashlib.new(algorithm)
    try:
        with open(path, "rb") as f:
            for chunk in iter(lambda: f.read(HASH_CHUNK_SIZE), b""):
                digest.update(chunk)
    except OSError as e:
        raise ContentHashError(f"Failed to hash file: {e}") from e

    logger.debug("%s of %s: %s", algorithm, path, digest.hexdigest())
    return digest.hexdigest()
