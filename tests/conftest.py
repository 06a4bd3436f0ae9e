import os

# Settings are read at import time, so the environment must be ready first
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-0123456789abcdef0123456789abcdef")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("STREAM_API_KEY", "test-stream-key")
os.environ.setdefault("STREAM_API_SECRET", "test-stream-secret-0123456789abcdef0123456789")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402

from court_booking.core.database import Base, get_db  # noqa: E402
from court_booking.main import app  # noqa: E402
from court_booking.models import Court, User  # noqa: E402


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def seed(session_factory):
    async with session_factory() as session:
        session.add_all(
            [
                User(id="1", name="Alice", email="alice@example.com", role="customer"),
                User(id="2", name="Bob", email="bob@example.com", role="customer"),
                Court(id=5, sport_type="badminton", court_no=2),
                Court(id=6, sport_type="badminton", court_no=1),
                Court(id=7, sport_type="futsal", court_no=1),
            ]
        )
        await session.commit()


@pytest_asyncio.fixture
async def db(session_factory, seed):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory, seed):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
