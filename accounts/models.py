"""
accounts/models.py -- Domain dataclass for the persisted user record.

Pattern: Data class (pure data container, zero logic). The store maps rows to
and from this shape; the service and routes never see raw rows.

Layer rule: no imports from web/.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UserRecord:
    """A registered user, exactly as stored.

    email is the lookup key. It is not unique: two signups with the same
    email both persist, and lookups return the earliest one.

    password_hash is the bcrypt output for the user's password. The plaintext
    password never appears on this object.
    """

    email: str
    password_hash: str
