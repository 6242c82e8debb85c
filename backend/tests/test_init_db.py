from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.models.user import User
from scripts.init_db import init_db


def _engine(tmp_path):
    return create_engine(f"sqlite:///{tmp_path / 'init.db'}")


def test_init_db_creates_tables(tmp_path):
    engine = _engine(tmp_path)
    assert init_db(bind=engine) == ["service_sessions", "users"]


def test_init_db_keeps_rows_unless_dropped(tmp_path):
    engine = _engine(tmp_path)
    init_db(bind=engine)
    Session = sessionmaker(bind=engine)
    with Session() as db:
        db.add(User(id="srv001", email="server1@church.org", role="server"))
        db.commit()

    init_db(bind=engine)
    with Session() as db:
        assert db.query(User).count() == 1

    init_db(bind=engine, drop=True)
    with Session() as db:
        assert db.query(User).count() == 0
