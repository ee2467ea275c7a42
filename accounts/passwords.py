"""
accounts/passwords.py -- bcrypt password hashing and verification.

The work factor is fixed at 10. The salt and cost are embedded in every hash,
so verify_password() needs nothing but the stored string.

bcrypt only reads the first 72 bytes of a password. Older bcrypt releases
dropped the rest silently; bcrypt >= 5 raises instead. Both functions cut the
UTF-8 encoding to 72 bytes themselves so long passwords keep working on every
release and hash the same way they always did.
"""

from __future__ import annotations

import bcrypt

BCRYPT_ROUNDS = 10
BCRYPT_MAX_BYTES = 72


def _encode(plain: str) -> bytes:
    return plain.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(plain: str) -> str:
    """Return a salted bcrypt hash of the given plaintext password."""
    return bcrypt.hashpw(_encode(plain), bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    """Return True if the plaintext password matches the bcrypt hash.

    A mismatch returns False. A malformed stored hash is not a mismatch:
    bcrypt's ValueError propagates so the caller can report it as a failure.
    """
    return bcrypt.checkpw(_encode(plain), hashed.encode("utf-8"))
