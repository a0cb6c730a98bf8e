# tests/routes/conftest.py
"""Pytest fixtures for route tests."""

from collections.abc import AsyncGenerator, Awaitable, Callable
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import select
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from bloglist.db import database
from bloglist.db.database import enable_sqlite_foreign_keys
from bloglist.main import app
from bloglist.managers import hash_password
from bloglist.models import BlogDB, UserDB

type SessionMaker = async_sessionmaker[SQLModelAsyncSession]

INITIAL_BLOGS = [
    {
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
    },
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
    },
]

INITIAL_USERS = [
    {"username": "cat0", "name": "Chencho Perez", "password": "miauuuuu"},
    {"username": "trolololo", "name": "Troll Face", "password": "llllllll"},
]


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Create an in-memory SQLite engine with the schema in place."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(test_engine)
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_maker(engine: AsyncEngine, monkeypatch: pytest.MonkeyPatch) -> SessionMaker:
    """Route every request session to the test engine."""
    maker = async_sessionmaker(
        engine,
        class_=SQLModelAsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    monkeypatch.setattr(database, "async_session_maker", maker)
    return maker


@pytest.fixture
async def client(session_maker: SessionMaker) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing."""
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac


@pytest.fixture
async def error_client(session_maker: SessionMaker) -> AsyncGenerator[AsyncClient]:
    """Client that receives server errors as responses instead of raising them."""
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app, raise_app_exceptions=False),
    ) as ac:
        yield ac


@pytest.fixture
def locked_database(monkeypatch: pytest.MonkeyPatch) -> AsyncMock:
    """Make every session commit fail the way a locked SQLite file does.

    Request it after any seeding fixture, since those commit too.
    """
    commit = AsyncMock(
        side_effect=OperationalError("COMMIT", {}, Exception("database is locked")),
    )
    monkeypatch.setattr(SQLModelAsyncSession, "commit", commit)
    return commit


@pytest.fixture
async def seeded_blogs(session_maker: SessionMaker) -> list[BlogDB]:
    """Store the initial blogs without a creating user."""
    blogs = [BlogDB(**blog) for blog in INITIAL_BLOGS]
    async with session_maker() as session:
        session.add_all(blogs)
        await session.commit()
    return blogs


@pytest.fixture
async def seeded_users(session_maker: SessionMaker) -> list[UserDB]:
    """Store the initial users with hashed passwords."""
    users = [
        UserDB(
            username=user["username"],
            name=user["name"],
            password_hash=await hash_password(user["password"]),
        )
        for user in INITIAL_USERS
    ]
    async with session_maker() as session:
        session.add_all(users)
        await session.commit()
    return users


@pytest.fixture
def blogs_in_db(session_maker: SessionMaker) -> Callable[[], Awaitable[list[BlogDB]]]:
    """Return a callable reading every stored blog."""

    async def read() -> list[BlogDB]:
        async with session_maker() as session:
            result = await session.execute(select(BlogDB))
            return list(result.scalars().all())

    return read


@pytest.fixture
def users_in_db(session_maker: SessionMaker) -> Callable[[], Awaitable[list[UserDB]]]:
    """Return a callable reading every stored user."""

    async def read() -> list[UserDB]:
        async with session_maker() as session:
            result = await session.execute(select(UserDB))
            return list(result.scalars().all())

    return read


@pytest.fixture
async def non_existing_id(session_maker: SessionMaker) -> str:
    """Return the id of a blog that existed and was then removed."""
    blog = BlogDB(title="willremovethissoon", author="nobody")
    async with session_maker() as session:
        session.add(blog)
        await session.commit()
        await session.delete(blog)
        await session.commit()
    return str(blog.id)
