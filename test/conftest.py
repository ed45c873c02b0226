"""
Pytest configuration and fixtures for the blog GraphQL API tests
"""

import os
import sys
from collections.abc import AsyncGenerator
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH119, PTH120

from app.database import Base  # noqa: E402
from app.graphql.context import GraphQLContext  # noqa: E402
from app.graphql.schema import build_schema  # noqa: E402
from app.models import Blog, BlogComment, BlogPost, Profile, User  # noqa: E402

BASE_TIME = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def at(minutes: int) -> datetime:
    """Deterministic creation timestamps so insertion order is testable."""
    return BASE_TIME + timedelta(minutes=minutes)


@pytest.fixture(scope="function")
async def test_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """
    A fresh file-backed SQLite database per test.

    A file (rather than :memory:) lets concurrently resolved fields open
    independent connections to the same data.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine: AsyncEngine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture(scope="session")
def schema():
    return build_schema()


@pytest.fixture
def context(session_factory) -> GraphQLContext:
    return GraphQLContext(session_factory=session_factory)


@pytest.fixture
def execute(schema, context):
    """Run a GraphQL document against the test database."""

    async def _execute(query: str, variables: dict | None = None, context_value: GraphQLContext | None = None):
        return await schema.execute(
            query,
            variable_values=variables,
            context_value=context_value or context,
        )

    return _execute


@pytest.fixture
def add(session_factory):
    """Insert ORM rows directly, bypassing the API."""

    async def _add(*rows):
        async with session_factory() as session:
            session.add_all(rows)
            await session.commit()
        return rows[0] if len(rows) == 1 else rows

    return _add


@pytest.fixture
async def test_user(add) -> User:
    """Seeded user with a fixed id."""
    return await add(User(id="u1", email="alice@example.com", username="alice", created_at=at(0)))


@pytest.fixture
async def other_user(add) -> User:
    return await add(User(id="u2", email="bob@example.com", username="bob", created_at=at(1)))


@pytest.fixture
async def test_profile(add, test_user: User) -> Profile:
    return await add(Profile(id="pr1", user_id=test_user.id, bio="Writes about databases", created_at=at(2)))


@pytest.fixture
async def test_blog(add, test_user: User) -> Blog:
    return await add(
        Blog(id="b1", author_id=test_user.id, name="Tech", description="stuff", created_at=at(3))
    )


@pytest.fixture
async def test_post(add, test_user: User, test_blog: Blog) -> BlogPost:
    return await add(
        BlogPost(
            id="p1",
            author_id=test_user.id,
            blog_id=test_blog.id,
            title="First post",
            content="Hello world",
            published=True,
            created_at=at(4),
        )
    )


@pytest.fixture
async def root_comment(add, other_user: User, test_post: BlogPost) -> BlogComment:
    """Top-level comment (no parent) on the test post."""
    return await add(
        BlogComment(
            id="c1",
            author_id=other_user.id,
            blog_post_id=test_post.id,
            content="Nice post",
            parent_id=None,
            created_at=at(5),
        )
    )
