"""
Password hashing helpers.

Passwords are hashed with PBKDF2-HMAC-SHA256 and a per-password random
salt.  The stored string has the form
``pbkdf2_sha256$<iterations>$<salt hex>$<hash hex>`` so the work factor
travels with each hash: increasing ``PASSWORD_HASH_ITERATIONS`` makes
new hashes slower to brute force while existing ones keep verifying.
"""

import hashlib
import hmac
import os
from typing import Optional

from .config import settings


ALGORITHM = "pbkdf2_sha256"
SALT_BYTES = 16


def _derive(password: str, salt: bytes, iterations: int) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)


def hash_password(password: str, iterations: Optional[int] = None) -> str:
    """Hash a password using PBKDF2-HMAC with SHA-256.

    Parameters
    ----------
    password : str
        The plain text password to hash.
    iterations : Optional[int]
        Work factor.  Defaults to ``settings.password_hash_iterations``.

    Returns
    -------
    str
        The encoded hash, salt and iteration count.
    """
    rounds = iterations or settings.password_hash_iterations
    if rounds < 1:
        raise ValueError("iterations must be a positive integer")
    salt = os.urandom(SALT_BYTES)
    dk = _derive(password, salt, rounds)
    return f"{ALGORITHM}${rounds}${salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """Verify a plain password against a stored hash string.

    The digest is recomputed with the salt and iteration count found in
    the stored string and compared in constant time.  A missing or
    malformed stored value never verifies.
    """
    if not hashed_password:
        return False
    parts = hashed_password.split("$")
    if len(parts) != 4 or parts[0] != ALGORITHM:
        return False
    try:
        rounds = int(parts[1])
        salt = bytes.fromhex(parts[2])
        stored_hash = bytes.fromhex(parts[3])
    except ValueError:
        return False
    if rounds < 1:
        return False
    return hmac.compare_digest(_derive(plain_password, salt, rounds), stored_hash)
