# tests/conftest.py

from __future__ import annotations

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from todo_app.core.database import build_engine, get_db, init_db
from todo_app.main import app
from todo_app.models.user import User

from .factories import ALICE_ID, BOB_ID, TickingClock


@pytest.fixture()
def clock() -> TickingClock:
    return TickingClock()


@pytest_asyncio.fixture()
async def engine():
    # One shared in-memory database per test.
    eng = build_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    await init_db(eng)
    yield eng
    await eng.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture()
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture()
async def users(session_factory):
    async with session_factory() as session:
        session.add_all(
            [
                User(id=str(ALICE_ID), name="Alice Example"),
                User(id=str(BOB_ID), name="Bob Example"),
            ]
        )
        await session.commit()
    return ALICE_ID, BOB_ID


@pytest_asyncio.fixture()
async def client(session_factory, users):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
