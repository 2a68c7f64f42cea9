import os
import tempfile
import pytest

# the engine is built at import time, point it at a throwaway sqlite file first
_db_dir = tempfile.mkdtemp(prefix="wishlist-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_db_dir, 'test.db')}"

from httpx import AsyncClient, ASGITransport
from asgi_lifespan import LifespanManager
from sqlmodel import SQLModel
from wishlist_api.db.connection import async_engine, async_session
from wishlist_api.main import app
from payloads import merchant_payload, product_payload, user_payload, user2_payload


async def reset_db():
    async with async_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)


@pytest.fixture
async def ac_client():
    async with LifespanManager(app):
        await reset_db()
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            yield ac


@pytest.fixture
async def db_session():
    async with async_session() as session:
        yield session


@pytest.fixture
async def user(ac_client):
    resp = await ac_client.post("/users", json=user_payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest.fixture
async def user2(ac_client):
    resp = await ac_client.post("/users", json=user2_payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest.fixture
async def merchant(ac_client):
    resp = await ac_client.post("/merchants", json=merchant_payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest.fixture
async def product(ac_client, merchant):
    resp = await ac_client.post("/products", json=product_payload(merchant["id"]))
    assert resp.status_code == 201, resp.text
    return resp.json()
