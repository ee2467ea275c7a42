"""
accounts/service.py -- Signup and login flows.

Outcomes are kept in two classes:
  Credential rejection (unknown email, wrong password): an expected result.
      authenticate_user() returns None and nothing is logged as an error.
      Unknown email and wrong password are indistinguishable to the caller.

  Infrastructure failure (anything raised while hashing, verifying, or
      talking to the store): unexpected. The
      original exception is logged with its traceback here and re-raised as
      SignupError / LoginError, whose message is safe to show to users.

Missing input is neither: MissingCredentialsError is raised before any
hashing or database work happens.

Layer rule: no imports from web/.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from accounts.models import UserRecord
from accounts.passwords import hash_password, verify_password

if TYPE_CHECKING:
    from accounts.store import UserStore

logger = logging.getLogger("credportal.accounts")


class CredentialFlowError(Exception):
    """Base class for errors surfaced by the signup and login flows."""


class MissingCredentialsError(CredentialFlowError):
    """The email or password field was absent or empty."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__("Email and password are required.")


class SignupError(CredentialFlowError):
    """Signup failed for a reason other than user input."""

    def __init__(self) -> None:
        super().__init__("Error during signup")


class LoginError(CredentialFlowError):
    """Login failed for a reason other than a credential mismatch."""

    def __init__(self) -> None:
        super().__init__("Error during login")


def _require_credentials(email: str | None, password: str | None) -> tuple[str, str]:
    missing = [name for name, value in (("email", email), ("password", password)) if not value]
    if missing:
        raise MissingCredentialsError(missing)
    return email or "", password or ""


def register_user(store: UserStore, email: str | None, password: str | None) -> UserRecord:
    """Hash the password and persist a new user record.

    No duplicate-email check is made. Returns the stored record.

    Raises:
        MissingCredentialsError: email or password missing.
        SignupError: hashing or persistence failed (already logged).
    """
    email, password = _require_credentials(email, password)
    try:
        record = UserRecord(email=email, password_hash=hash_password(password))
        user_id = store.insert(record)
    except Exception as exc:
        logger.exception("Signup failed: %s", type(exc).__name__)
        raise SignupError() from exc
    logger.info("User signed up (id=%d)", user_id)
    return record


def authenticate_user(store: UserStore, email: str | None, password: str | None) -> UserRecord | None:
    """Check an email/password pair against the store.

    Returns the matching record on success, None on credential rejection.

    Raises:
        MissingCredentialsError: email or password missing.
        LoginError: lookup or hash verification failed (already logged).
    """
    email, password = _require_credentials(email, password)
    try:
        record = store.find_one_by_email(email)
        if record is None:
            return None
        if not verify_password(password, record.password_hash):
            return None
    except Exception as exc:
        logger.exception("Login failed: %s", type(exc).__name__)
        raise LoginError() from exc
    return record
