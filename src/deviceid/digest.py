"""SHA-256 fingerprinting of raw platform data."""

import hashlib

DEVICE_ID_LENGTH = 64

_HEX_DIGITS = frozenset("0123456789abcdef")


def digest(data: bytes | str) -> str:
    """Hash raw probe output into a 64-character lowercase hex fingerprint.

    The input is hashed exactly as given. Strings are UTF-8 encoded first;
    no trimming or case-folding is applied.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).hexdigest()


def is_valid_sha256(value: object) -> bool:
    """Return True if value is a 64-character lowercase hex string."""
    if not isinstance(value, str) or len(value) != DEVICE_ID_LENGTH:
        return False
    return all(ch in _HEX_DIGITS for ch in value)
