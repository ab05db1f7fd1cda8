import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from trustreet.models.db import Base


@pytest.fixture
async def session_factory(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, expire_on_commit=False)
    await engine.dispose()


@pytest.fixture
def seed(session_factory):
    """Insert ORM rows in their own session so lookups read them back from the database."""
    async def _seed(*rows):
        async with session_factory() as s:
            s.add_all(rows)
            await s.commit()
    return _seed


@pytest.fixture
async def session(session_factory):
    async with session_factory() as s:
        yield s
