"""PBKDF2-HMAC-SHA256 password hashing.

Stored format: ``<salt_hex>:<hash_hex>``.
"""

from __future__ import annotations

import hashlib
import hmac
import secrets

SALT_LENGTH = 16
HASH_LENGTH = 32
ITERATIONS = 100_000


def _derive(password: str, salt: bytes) -> bytes:
    return hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), salt, ITERATIONS, dklen=HASH_LENGTH
    )


def hash_password(password: str) -> str:
    salt = secrets.token_bytes(SALT_LENGTH)
    return f"{salt.hex()}:{_derive(password, salt).hex()}"


def verify_password(password: str, stored: str) -> bool:
    """Constant-time comparison; a malformed stored hash never matches."""
    salt_hex, sep, hash_hex = stored.partition(":")
    if not sep or not salt_hex or not hash_hex:
        return False
    try:
        salt = bytes.fromhex(salt_hex)
        expected = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    if len(expected) != HASH_LENGTH:
        return False
    return hmac.compare_digest(_derive(password, salt), expected)
