"""Pytest configuration and fixtures for neo-pagination tests."""

import random
import uuid
from typing import List

import pytest
from unittest.mock import AsyncMock

from sqlalchemy import ForeignKey, String, Uuid, create_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, relationship

from neo_pagination.config.settings import get_pagination_settings


class Base(DeclarativeBase):
    pass


class User(Base):
    """Integer primary key entity."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    email: Mapped[str] = mapped_column(String(100))


class Membership(Base):
    """Composite primary key entity."""

    __tablename__ = "memberships"

    organization_id: Mapped[str] = mapped_column(String(36), primary_key=True)
    user_id: Mapped[int] = mapped_column(primary_key=True)
    role: Mapped[str] = mapped_column(String(20), default="member")


class ApiKey(Base):
    """UUID primary key entity."""

    __tablename__ = "api_keys"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    label: Mapped[str] = mapped_column(String(50))


class Author(Base):
    """Entity with a one-to-many collection."""

    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(50))
    books: Mapped[List["Book"]] = relationship(back_populates="author", order_by="Book.id")


class Book(Base):
    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(100))
    author_id: Mapped[int] = mapped_column(ForeignKey("authors.id"))
    author: Mapped[Author] = relationship(back_populates="books")


class RecordingSource:
    """Sync page source that records every call made against it."""

    def __init__(self, items):
        self.items = list(items)
        self.calls = []

    def count(self):
        self.calls.append(("count",))
        return len(self.items)

    def fetch_window(self, offset, limit):
        self.calls.append(("fetch_window", offset, limit))
        return self.items[offset:offset + limit]


class AsyncRecordingSource(RecordingSource):
    """Async page source that records every call made against it."""

    async def count(self):
        return RecordingSource.count(self)

    async def fetch_window(self, offset, limit):
        return RecordingSource.fetch_window(self, offset, limit)


@pytest.fixture(autouse=True)
def clean_pagination_env(monkeypatch):
    """Isolate tests from PAGINATION_* variables and the settings cache."""
    monkeypatch.delenv("PAGINATION_DEFAULT_PAGE_SIZE", raising=False)
    monkeypatch.delenv("PAGINATION_MAX_PAGE_SIZE", raising=False)
    get_pagination_settings.cache_clear()
    yield
    get_pagination_settings.cache_clear()


@pytest.fixture
def twenty_five_items():
    """25 sequential items."""
    return [f"item-{i}" for i in range(1, 26)]


@pytest.fixture
def recording_source(twenty_five_items):
    return RecordingSource(twenty_five_items)


@pytest.fixture
def async_recording_source(twenty_five_items):
    return AsyncRecordingSource(twenty_five_items)


@pytest.fixture
def engine():
    """In-memory SQLite engine with the test schema."""
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    """Session seeded with 25 users (shuffled ids), memberships, API keys and authors."""
    with Session(engine) as session:
        ids = list(range(1, 26))
        random.Random(7).shuffle(ids)
        session.add_all(User(id=i, email=f"user{i}@example.com") for i in ids)

        org_ids = sorted(str(uuid.UUID(int=n)) for n in (3, 1, 2))
        session.add_all(
            Membership(organization_id=org_id, user_id=user_id)
            for org_id in reversed(org_ids)
            for user_id in (2, 1)
        )

        session.add_all(
            ApiKey(id=uuid.UUID(int=n * 7919), label=f"key-{n}") for n in (5, 2, 9, 1, 7)
        )

        # three books per author, so joined eager loads repeat each author row
        for author_id in range(1, 6):
            author = Author(id=author_id, name=f"author-{author_id}")
            author.books = [
                Book(id=author_id * 10 + n, title=f"book-{author_id}-{n}") for n in range(3)
            ]
            session.add(author)
        session.commit()
        yield session


@pytest.fixture
def mock_asyncpg_connection():
    """Mock asyncpg pool/connection."""
    connection = AsyncMock()
    connection.fetch = AsyncMock(return_value=[])
    connection.fetchval = AsyncMock(return_value=0)
    return connection
