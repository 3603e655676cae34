"""Shared fixtures: an isolated test database, a seeded store and an API client."""

import os

# The service engine is built at import time; keep it off the production default
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from apps.shared.database import Base, get_db
from apps.blog.main import app
from apps.blog.seed import seed_blogposts
from apps.blog.store import BlogPostStore

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite://")

if TEST_DATABASE_URL.startswith("sqlite"):
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
else:
    engine = create_engine(TEST_DATABASE_URL)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def tables():
    """Fresh tables for every test; dropped afterwards."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def store(db_session):
    return BlogPostStore(db_session)


@pytest.fixture
def seeded():
    """Ten random posts, committed before the test runs."""
    db = TestingSessionLocal()
    try:
        posts = seed_blogposts(BlogPostStore(db), 10)
        return [post.id for post in posts]
    finally:
        db.close()


@pytest.fixture
def client():
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def fetch_post():
    """Read a post straight from the test database in its own session."""

    def _fetch(post_id):
        db = TestingSessionLocal()
        try:
            return BlogPostStore(db).find_by_id(post_id)
        finally:
            db.close()

    return _fetch


@pytest.fixture
def count_posts():
    def _count():
        db = TestingSessionLocal()
        try:
            return len(BlogPostStore(db).find(limit=1000))
        finally:
            db.close()

    return _count
