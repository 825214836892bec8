from __future__ import annotations

from typing import AsyncIterator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from pos_api.api import deps
from pos_api.database import init_db
from pos_api.main import app


@pytest_asyncio.fixture
async def engine(tmp_path) -> AsyncIterator[AsyncEngine]:
    """Banco SQLite isolado por teste."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'pos_test.db'}")
    assert await init_db(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncIterator[AsyncClient]:
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[deps.get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def customer(client: AsyncClient) -> dict:
    resp = await client.post(
        "/api/customers",
        json={
            "name": "Apex Retail",
            "email": "billing@apex.example",
            "phone": "+91 98765 43210",
            "address": "12 MG Road, Bengaluru",
            "pincode": "560001",
            "paymentMode": "UPI",
            "accountManager": "R. Iyer",
            "billingCurrency": "INR",
        },
    )
    assert resp.status_code == 201
    return resp.json()["customer"]
