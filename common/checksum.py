"""SHA-256 block digests, computed at write time and checked on read."""

import hashlib


def compute_checksum(data: bytes) -> str:
    """
    Digest a block's exact bytes.

    Args:
        data: Block contents

    Returns:
        64-character lowercase hex SHA-256 digest
    """
    return hashlib.sha256(data).hexdigest()


def verify_checksum(data: bytes, expected: str) -> bool:
    """True if data still hashes to the digest recorded for it."""
    return compute_checksum(data) == expected
