"""
Point the app at an in-memory SQLite database before anything imports it,
and give every test empty tables.
"""
import os

os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["ENV"] = "test"

import pytest

from exercise_tracker import models  # noqa: F401  # registers tables
from exercise_tracker.db import Base, SessionLocal, engine


@pytest.fixture(autouse=True)
def fresh_tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
