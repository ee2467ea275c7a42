"""Unit tests for accounts/store.py -- UserStore insert and lookup.

Covers:
- insert() then find_one_by_email() returns the same record
- unknown email returns None
- duplicate emails are accepted and lookup returns the earliest
- lookup is an exact match
- a failed insert leaves no row behind
"""

import pytest
from sqlalchemy.exc import SQLAlchemyError

from accounts.models import UserRecord
from accounts.store import UserStore


def test_insert_then_find(store: UserStore):
    record = UserRecord(email="a@x.com", password_hash="$2b$10$abcdefghijklmnopqrstuv")
    user_id = store.insert(record)
    assert isinstance(user_id, int)
    assert store.find_one_by_email("a@x.com") == record


def test_find_unknown_email_returns_none(store: UserStore):
    assert store.find_one_by_email("nobody@x.com") is None


def test_duplicate_emails_return_first_match(store: UserStore):
    first = UserRecord(email="dup@x.com", password_hash="hash-one")
    second = UserRecord(email="dup@x.com", password_hash="hash-two")
    first_id = store.insert(first)
    second_id = store.insert(second)
    assert first_id != second_id
    assert store.find_one_by_email("dup@x.com") == first


def test_lookup_is_exact_match(store: UserStore):
    store.insert(UserRecord(email="Case@x.com", password_hash="h"))
    assert store.find_one_by_email("case@x.com") is None
    assert store.find_one_by_email("Case@x.com") is not None


def test_failed_insert_leaves_no_row(store: UserStore):
    # password_hash is NOT NULL, so the database itself rejects this row.
    with pytest.raises(SQLAlchemyError):
        store.insert(UserRecord(email="broken@x.com", password_hash=None))
    assert store.find_one_by_email("broken@x.com") is None
