"""
Shared fixtures: every test runs against a fresh in-memory SQLite database.
"""

import os

# 必須在匯入 app 之前設定，讓引擎建立在記憶體資料庫上
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from app.db.base import enable_sqlite_foreign_keys
from app.main import app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def client():
    """啟動應用（含 lifespan 建表），結束時釋放連線，資料隨之清空"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
async def session():
    """供儲存庫與服務層測試使用的獨立資料庫會話"""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(engine.sync_engine, "connect", enable_sqlite_foreign_keys)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    session_maker = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as db_session:
        yield db_session

    await engine.dispose()
