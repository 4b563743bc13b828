"""Fixtures for API tests."""

import asyncio
import copy
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import NullPool

from rule_designer.main import app
from rule_designer.core.database import Base, get_db
from rule_designer.rule_engine.templates import STARTER_GRAPH


@pytest.fixture
def test_engine(tmp_path):
    """Create a file-backed SQLite engine usable from the TestClient's event loop."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'rules.db'}",
        connect_args={"check_same_thread": False},
        poolclass=NullPool,
    )

    async def create_tables():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(create_tables())
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture
def client(test_engine):
    """Create a test client with the database dependency overridden."""
    async_session = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )

    async def get_test_db():
        async with async_session() as session:
            yield session

    app.dependency_overrides[get_db] = get_test_db

    yield TestClient(app)

    app.dependency_overrides = {}


@pytest.fixture
def sample_graph():
    """The designer's starter graph: customer.age >= 18 -> customer.eligible = true."""
    return copy.deepcopy(STARTER_GRAPH)
