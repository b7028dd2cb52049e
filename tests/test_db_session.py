from sqlalchemy import text
from sqlalchemy.orm import Session

from tunerec.db.session import _engine_kwargs, get_db


def test_get_db_yields_working_session_and_closes():
    generator = get_db()
    db = next(generator)

    assert isinstance(db, Session)
    assert db.execute(text("SELECT 1")).scalar() == 1

    generator.close()


def test_engine_kwargs_per_dialect():
    assert _engine_kwargs("sqlite+pysqlite://") == {"connect_args": {"check_same_thread": False}}
    assert _engine_kwargs("postgresql+psycopg2://u:p@localhost/db") == {"pool_pre_ping": True}
