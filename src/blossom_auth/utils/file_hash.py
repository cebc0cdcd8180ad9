"""File digests for the ``x`` and ``size`` claims."""

import hashlib
import logging
import os
import secrets

from ..errors import FileHashError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def sha256_file(file_path: str, chunk_size: int = CHUNK_SIZE) -> str:
    """Stream a file through SHA-256 and return the lowercase hex digest.

    :param file_path: Path of the blob to hash.
    :param chunk_size: Read buffer size in bytes.
    :return: 64-char hex digest.
    :raises FileHashError: If the file cannot be opened or read.
    """
    hasher = hashlib.sha256()
    try:
        with open(file_path, 'rb') as f:
            for chunk in iter(lambda: f.read(chunk_size), b''):
                hasher.update(chunk)
    except OSError as e:
        raise FileHashError(f"Cannot read {file_path}: {e.strerror or e}") from e
    digest = hasher.hexdigest()
    logger.debug("sha256(%s) = %s", file_path, digest)
    return digest


def file_size(file_path: str) -> int:
    try:
        return os.path.getsize(file_path)
    except OSError as e:
        raise FileHashError(f"Cannot stat {file_path}: {e.strerror or e}") from e


def random_sha256() -> str:
    """Return 32 random bytes as hex: shaped like a SHA-256 digest, matching no blob."""
    return secrets.token_bytes(32).hex()
