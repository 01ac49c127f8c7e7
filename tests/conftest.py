"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite database, session and httpx client fixtures.
Each test gets a fresh schema on its own engine (StaticPool keeps the single
in-memory connection shared by every session of that engine).
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import *  # noqa: F401,F403 — register all models with metadata
from app.models.post import Category, Post
from app.models.user import User

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 매 테스트마다 스키마를 새로 생성합니다."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다.

    raise_app_exceptions=False: 500 응답을 예외 대신 응답으로 받음
    (Unhandled errors surface as 500 responses instead of raising in the test).
    """
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def user(db: AsyncSession) -> User:
    """테스트 사용자를 생성합니다."""
    u = User(name="John Doe", email="john@example.com")
    db.add(u)
    await db.flush()
    await db.refresh(u)
    return u


@pytest_asyncio.fixture
async def categories(db: AsyncSession) -> dict[str, Category]:
    """Java, Python 카테고리를 생성합니다."""
    result: dict[str, Category] = {}
    for name in ("Java", "Python"):
        category = Category(name=name, description=f"{name} articles")
        db.add(category)
        await db.flush()
        await db.refresh(category)
        result[name] = category
    return result


@pytest_asyncio.fixture
async def posts(db: AsyncSession, user: User, categories: dict[str, Category]) -> dict[str, Post]:
    """기본 게시글 3개를 생성합니다.

    "Learn Java Loops"/Java, "Advanced Java Streams"/Java, "Python Basics"/Python.
    """
    result: dict[str, Post] = {}
    for title, category_name in [
        ("Learn Java Loops", "Java"),
        ("Advanced Java Streams", "Java"),
        ("Python Basics", "Python"),
    ]:
        post = Post(
            title=title,
            content="Content",
            user_id=user.id,
            category_id=categories[category_name].id,
        )
        db.add(post)
        await db.flush()
        await db.refresh(post)
        result[title] = post
    return result


@pytest_asyncio.fixture
async def uncategorized_post(db: AsyncSession, user: User) -> Post:
    """카테고리 없는 게시글을 생성합니다."""
    post = Post(title="Java without a home", content="Loose thoughts", user_id=user.id)
    db.add(post)
    await db.flush()
    await db.refresh(post)
    return post
