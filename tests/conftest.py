import os
import uuid
from datetime import timedelta

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool
from sqlalchemy.orm import sessionmaker

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite://")

from tunerec.db.session import Base
import tunerec.models  # noqa: F401
from tunerec.crud.recommendation import recommendation_crud
from tunerec.crud.track import track_crud
from tunerec.crud.user import user_crud
from tunerec.services.recommendations import get_recommendation_service
from tunerec.utils.datetimes import utcnow

TEST_DATABASE_URL = "sqlite+pysqlite://"


def _create_test_engine():
    """Create an in-memory SQLite engine for tests."""
    return create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture(scope="session")
def test_engine():
    """Provide a session-scoped SQLAlchemy engine with tables created."""
    engine = _create_test_engine()
    Base.metadata.create_all(bind=engine)
    return engine


@pytest.fixture()
def db_session(test_engine):
    """Provide a database session and empty every table afterwards."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        for table in reversed(Base.metadata.sorted_tables):
            session.execute(table.delete())
        session.commit()
        session.close()


def _create_user(db_session, **overrides):
    """Create a test user with sensible defaults."""
    suffix = uuid.uuid4().hex
    data = {
        "email": overrides.pop("email", f"user-{suffix}@example.com"),
        "first_name": overrides.pop("first_name", "Test"),
        "last_name": overrides.pop("last_name", "User"),
        "display_name": overrides.pop("display_name", None),
        "is_active": overrides.pop("is_active", True),
    }
    data.update(overrides)
    return user_crud.create(db_session, data)


@pytest.fixture()
def user(db_session):
    return _create_user(db_session)


@pytest.fixture()
def other_user(db_session):
    return _create_user(db_session, first_name="Other")


@pytest.fixture()
def make_user(db_session):
    def _make(**overrides):
        return _create_user(db_session, **overrides)

    return _make


@pytest.fixture()
def make_track(db_session):
    """Create a track uploaded ``days_old`` days (plus half an hour) ago."""
    counter = {"n": 0}

    def _make(uploader, days_old: int = 40, **overrides):
        counter["n"] += 1
        data = {
            "title": overrides.pop("title", f"Track {counter['n']}"),
            "artist": overrides.pop("artist", f"Artist {counter['n']}"),
            "album": overrides.pop("album", None),
            "genre": overrides.pop("genre", None),
            "duration": overrides.pop("duration", 180),
            "play_count": overrides.pop("play_count", 0),
            "uploaded_by_user_id": uploader.id,
            "created_at": utcnow() - timedelta(days=days_old, minutes=30),
        }
        data.update(overrides)
        return track_crud.create(db_session, data)

    return _make


@pytest.fixture()
def make_recommendation(db_session):
    """Insert a stored recommendation created ``days_old`` days ago."""

    def _make(user, track, days_old: float = 0, reason: str = "genre", score: float = 0.9, **flags):
        recommendation = recommendation_crud.create(
            db_session,
            {
                "user_id": user.id,
                "track_id": track.id,
                "reason": reason,
                "score": score,
                "created_at": utcnow() - timedelta(days=days_old),
            },
        )
        if flags:
            recommendation = recommendation_crud.update(db_session, recommendation, flags)
        return recommendation

    return _make


@pytest.fixture()
def service(db_session):
    return get_recommendation_service(db_session)
