"""Provides SHA-1 digest calculation and verification helpers."""

import hashlib


def compute_digest(data: bytes) -> str:
    """
    Compute SHA-1 digest for given data.

    Args:
        data: Bytes to compute digest for

    Returns:
        40-character uppercase hexadecimal representation of the SHA-1 hash
    """
    return hashlib.sha1(data).hexdigest().upper()


def verify_digest(data: bytes, expected: str) -> bool:
    """
    Verify that data matches expected digest.

    Args:
        data: Bytes to verify
        expected: Expected SHA-1 digest (hex string, either case)

    Returns:
        True if digest matches, False otherwise
    """
    return compute_digest(data) == expected.upper()
