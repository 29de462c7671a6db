"""
Campus Web — Test Configuration (conftest.py)
===============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── fixed_now: a pinned datetime (2024-03-15 09:30, a spring morning)
    ├── composer: LocalsComposer with pinned clock and theme
    ├── db_session_factory: in-memory SQLite schema seeded with a small catalog
    ├── db_session: one AsyncSession from that factory
    └── test_client: HTTPX AsyncClient over the full app, DB dependency overridden
"""

import os

# Override settings for testing BEFORE any campusweb imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["NODE_ENV"] = "development"
os.environ["SESSION_SECRET"] = "test-session-secret"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"

from datetime import datetime
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import campusweb.models  # noqa: F401
from campusweb.database import Base, get_db_session
from campusweb.models import Course, Department, Faculty, Section
from campusweb.presentation.context import LocalsComposer
from campusweb.presentation.themes import Theme


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 15, 9, 30)


@pytest.fixture
def composer(fixed_now) -> LocalsComposer:
    """Composer with a pinned clock and a theme picker that always says green."""
    return LocalsComposer(
        environment="development",
        clock=lambda: fixed_now,
        theme_picker=lambda: Theme.GREEN,
    )


async def _seed(session: AsyncSession) -> None:
    cs = Department(id=1, code="CS", name="Computer Science")
    math = Department(id=2, code="MATH", name="Mathematics")
    session.add_all([cs, math])

    session.add_all([
        Course(id=1, slug="cs121", course_code="CS121", name="Introduction to Programming",
               description="Programming fundamentals.", credit_hours=3, department_id=1),
        Course(id=2, slug="cs162", course_code="CS162", name="Introduction to Computer Science",
               description="Object-oriented programming.", credit_hours=3, department_id=1),
        Course(id=3, slug="math119", course_code="MATH119", name="Calculus I",
               description="Differential and integral calculus.", credit_hours=4, department_id=2),
    ])

    session.add_all([
        Faculty(id=1, slug="jack-brown", first_name="Jack", last_name="Brown",
                title="Associate Professor", office="STC 392", email="brownj@example.edu",
                department_id=1),
        Faculty(id=2, slug="ann-enkey", first_name="Ann", last_name="Enkey",
                title="Assistant Professor", office="STC 394", department_id=1),
        Faculty(id=3, slug="mary-anderson", first_name="Mary", last_name="Anderson",
                title="Professor", office="MC 301", department_id=2),
    ])

    session.add_all([
        Section(id=1, course_slug="cs121", faculty_slug="jack-brown",
                time="Mon Wed Fri 11:00-11:50", room="STC 392"),
        Section(id=2, course_slug="cs121", faculty_slug="ann-enkey",
                time="Tue Thu 14:00-15:15", room="STC 394"),
        Section(id=3, course_slug="cs121", faculty_slug="jack-brown",
                time="Mon Wed Fri 9:00-9:50", room="STC 390"),
        Section(id=4, course_slug="math119", faculty_slug="mary-anderson",
                time="Mon Wed 8:00-9:15", room="MC 290"),
    ])
    await session.commit()


@pytest_asyncio.fixture
async def db_session_factory() -> AsyncGenerator[async_sessionmaker, None]:
    """
    Fresh in-memory SQLite database per test, schema created from the models.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        await _seed(session)

    yield factory
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with db_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(composer, db_session_factory) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTPX AsyncClient talking to a freshly built app.

    Usage:
        async def test_home(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    from campusweb.main import create_app

    app = create_app(composer=composer)

    async def override_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with db_session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_db_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
