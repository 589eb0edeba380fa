import os
import tempfile

# Configure before the application modules read their settings
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("UPLOADS_DIR", tempfile.mkdtemp(prefix="resume-uploads-"))
os.environ.setdefault("SECRET_KEY", "test-secret-key-with-enough-length-for-hs256")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from resume_builder.database import Base, get_db
from resume_builder.main import app
from resume_builder.models import User
from resume_builder.services.auth import create_access_token, get_password_hash


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def client(session_maker):
    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac
    app.dependency_overrides.clear()


async def create_user(session_maker, **overrides) -> User:
    values = {
        "username": "jdoe",
        "email": "john@example.com",
        "name": "John",
        "hashed_password": get_password_hash("secret123"),
        "location": "Boston",
        "phone": "555-0100",
        "linkedin_url": "https://www.linkedin.com/in/jdoe",
    }
    values.update(overrides)
    async with session_maker() as db:
        user = User(**values)
        db.add(user)
        await db.commit()
        await db.refresh(user)
        return user


def headers_for(user: User) -> dict:
    token = create_access_token({"sub": str(user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def user(session_maker):
    return await create_user(session_maker)


@pytest.fixture
def auth_headers(user):
    return headers_for(user)


@pytest.fixture
def make_user(session_maker):
    async def _make_user(**overrides) -> User:
        return await create_user(session_maker, **overrides)
    return _make_user


@pytest.fixture
def token_headers():
    return headers_for
