"""
tests/conftest.py -- Fixtures shared by the credportal tests.

Stores use named shared-cache SQLite URIs instead of plain :memory: because
TestClient runs sync handlers on worker threads, and a plain in-memory
database would be empty on every thread but the one that created it.
"""

from __future__ import annotations

import itertools
from collections.abc import Generator
from contextlib import asynccontextmanager

import pytest
from fastapi.testclient import TestClient

from accounts.store import UserStore
from asgi import app

_db_counter = itertools.count()


def _make_test_store(db_suffix: str) -> UserStore:
    """Create an isolated named shared-memory SQLite store.

    Args:
        db_suffix: Unique string appended to the DB name so stores created by
                   different fixtures never share rows.
    """
    return UserStore(f"sqlite:///file:test_users_{db_suffix}?mode=memory&cache=shared&uri=true")


def _patch_lifespan(user_store: UserStore):
    """Return an async context manager that replaces the real lifespan.

    Publishes the pre-created test store on app.state so routes hit the
    isolated database rather than the configured one.
    """

    @asynccontextmanager
    async def test_lifespan(app):
        app.state.user_store = user_store
        yield

    return test_lifespan


@pytest.fixture
def store() -> Generator[UserStore, None, None]:
    """Empty UserStore, unique per test."""
    s = _make_test_store(f"unit_{next(_db_counter)}")
    yield s
    s.close()


@pytest.fixture
def web_client() -> Generator[tuple[TestClient, UserStore], None, None]:
    """Yield (client, store) for web route integration tests.

    One client and one empty database per test, so signups in one test are
    never visible to another.
    """
    user_store = _make_test_store(f"web_{next(_db_counter)}")
    app.router.lifespan_context = _patch_lifespan(user_store)

    with TestClient(app, raise_server_exceptions=True) as client:
        yield client, user_store

    user_store.close()
