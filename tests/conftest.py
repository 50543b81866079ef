"""
Pytest configuration and fixtures for testing.
"""
import os
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import get_db
from app.main import app
from app.models import Base, User, UserProfile, TeamProfile
from app.services.auth import create_access_token
from app.services.permissions import ADMIN, USER


@pytest.fixture
async def db() -> AsyncGenerator[AsyncSession, None]:
    """
    Fixture that provides a database session for each test.
    Each test gets its own in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.close()

    await engine.dispose()


@pytest.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Async HTTP client for API testing.
    Overrides the database dependency to use the test session.
    """

    async def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


def bearer(user: User) -> dict:
    """Authorization header for a user."""
    return {"Authorization": f"Bearer {create_access_token(user.login)}"}


# ============================================================================
# CALLERS
# ============================================================================

@pytest.fixture
async def admin_user(db: AsyncSession) -> User:
    """Create a user holding the admin role."""
    from tests.crud import create_user

    user = await create_user(db, login="admin", roles=[ADMIN, USER])
    await db.commit()
    return user


@pytest.fixture
async def member_user(db: AsyncSession) -> User:
    """Create a regular user who will be a member of the sample team."""
    from tests.crud import create_user

    user = await create_user(db, login="member", roles=[USER])
    await db.commit()
    return user


@pytest.fixture
async def outsider_user(db: AsyncSession) -> User:
    """Create a regular user who belongs to no team."""
    from tests.crud import create_user

    user = await create_user(db, login="outsider", roles=[USER])
    await db.commit()
    return user


@pytest.fixture
async def admin_headers(admin_user: User) -> dict:
    return bearer(admin_user)


@pytest.fixture
async def member_headers(member_user: User) -> dict:
    return bearer(member_user)


@pytest.fixture
async def outsider_headers(outsider_user: User) -> dict:
    return bearer(outsider_user)


# ============================================================================
# SAMPLE DATA
# ============================================================================

@pytest.fixture
async def member_profile(db: AsyncSession, member_user: User) -> UserProfile:
    """User profile of the member user."""
    from tests.crud import create_user_profile

    profile = await create_user_profile(db, member_user, display_name="Team Member")
    await db.commit()
    return profile


@pytest.fixture
async def sample_team_profile(db: AsyncSession, member_profile: UserProfile) -> TeamProfile:
    """Create a team profile with the member user on the team."""
    from tests.crud import create_team_profile

    team_profile = await create_team_profile(
        db,
        name="Birmingham Bears",
        description="Weekend five-a-side",
        image_url="https://example.com/bears.png",
        members=[member_profile],
    )
    await db.commit()
    return team_profile
