"""
Content integrity check for downloaded archives.
"""

import hashlib

from homebruh.bruh_exceptions import HashMismatchError


def compute_digest(data: bytes) -> str:
    """Lowercase hex sha256 of `data`."""
    return hashlib.sha256(data).hexdigest()


def verify(data: bytes, expected_hex_digest: str) -> None:
    """
    Check `data` against `expected_hex_digest`, ignoring case.

    Raises:
        HashMismatchError: when the digests differ
    """
    found = compute_digest(data)
    if found != expected_hex_digest.strip().lower():
        raise HashMismatchError(expected=expected_hex_digest, found=found)
