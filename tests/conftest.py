"""
Shared fixtures: a fresh SQLite file database per test, wired into the app
through a get_db override, plus small helpers for users and logins.
"""
from __future__ import annotations

import asyncio
import os
import tempfile

import pytest

# ── App bootstrap ──────────────────────────────────────────────────────────────
# DATABASE_URL is required and the engine is built at import time
_BOOTSTRAP_DIR = tempfile.mkdtemp(prefix="mlcourse-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{_BOOTSTRAP_DIR}/bootstrap.db")
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("QUIZ_PASS_SCORE", "5")
os.environ.setdefault("QUIZ_DEMO_QUESTION_LIMIT", "2")

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

from mlcourse.db.base import Base  # noqa: E402
from mlcourse.db.session import get_db  # noqa: E402
from mlcourse.main import app  # noqa: E402

DEFAULT_USER = {
    "name": "Ada Lovelace",
    "age": 28,
    "phone": "0300-1234567",
    "username": "ada",
    "password": "secret123",
}


@pytest.fixture
def engine(tmp_path):
    # NullPool: the TestClient portal and asyncio.run() use different loops
    eng = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)

    async def _create():
        async with eng.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(_create())
    yield eng
    asyncio.run(eng.dispose())


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def run_db(session_factory):
    """Run `await fn(db, *args)` against the test database and return its result."""

    def _run(fn, *args):
        async def _inner():
            async with session_factory() as db:
                return await fn(db, *args)

        return asyncio.run(_inner())

    return _run


@pytest.fixture
def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# ── Helpers ────────────────────────────────────────────────────────────────────

def register(client, **overrides):
    return client.post("/user", json={**DEFAULT_USER, **overrides})


def api_token(client, username="ada", password="secret123") -> str:
    resp = client.post("/user/login", json={"username": username, "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()["data"]


def web_login(client, username="ada", password="secret123"):
    return client.post("/login", data={"username": username, "password": password})


@pytest.fixture
def user(client) -> dict:
    resp = register(client)
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


@pytest.fixture
def auth_header(client, user) -> dict:
    return {"Authorization": api_token(client)}


@pytest.fixture
def logged_in(client, user):
    web_login(client)
    return client
