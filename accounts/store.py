"""
accounts/store.py -- SQLAlchemy Core repository for user records.

email is indexed but not unique: a repeated signup is another row, and
find_one_by_email() returns the earliest one. One UserStore lives for the
whole process (opened and closed by the web/app.py lifespan).
"""

from __future__ import annotations

import logging

from sqlalchemy import Column, Integer, MetaData, String, Table, Text, create_engine, event
from sqlalchemy.engine import Engine

from accounts.models import UserRecord

logger = logging.getLogger("credportal.accounts")

# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------

_metadata = MetaData()

_users = Table(
    "users",
    _metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("email", String(320), nullable=False, index=True),
    Column("password_hash", Text, nullable=False),
)


def _set_wal_mode(dbapi_conn, connection_record) -> None:
    # Per connection; readers keep going while a signup writes.
    dbapi_conn.execute("PRAGMA journal_mode=WAL")


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


class UserStore:
    """Repository for UserRecord entities.

    Usage:
        store = UserStore("sqlite:///users.db")
        store.insert(UserRecord(email="a@x.com", password_hash=hash_password("secret")))
        record = store.find_one_by_email("a@x.com")
        store.close()
    """

    def __init__(self, db_url: str) -> None:
        connect_args: dict = {}
        if db_url.startswith("sqlite"):
            connect_args["check_same_thread"] = False
        self.engine: Engine = create_engine(db_url, connect_args=connect_args)
        if db_url.startswith("sqlite"):
            event.listen(self.engine, "connect", _set_wal_mode)
        _metadata.create_all(self.engine)
        logger.debug("User store opened (%s)", self.engine.url.render_as_string(hide_password=True))

    def insert(self, record: UserRecord) -> int:
        """Persist a new user record and return its database ID.

        The insert runs in its own transaction: on any error it is rolled back
        and the SQLAlchemyError propagates, so no partial row is left behind.
        """
        with self.engine.begin() as conn:
            result = conn.execute(
                _users.insert().values(
                    email=record.email,
                    password_hash=record.password_hash,
                )
            )
            return result.inserted_primary_key[0]

    def find_one_by_email(self, email: str) -> UserRecord | None:
        """Return the first record with this exact email, or None if not found."""
        with self.engine.connect() as conn:
            row = conn.execute(
                _users.select().where(_users.c.email == email).order_by(_users.c.id).limit(1)
            ).fetchone()
        return _row_to_record(row) if row is not None else None

    def close(self) -> None:
        self.engine.dispose()


# ---------------------------------------------------------------------------
# Row mapper (Data Mapper pattern)
# ---------------------------------------------------------------------------


def _row_to_record(row) -> UserRecord:
    return UserRecord(email=row.email, password_hash=row.password_hash)
