"""Create the users and service_sessions tables.

Usage:
  python scripts/init_db.py           # create missing tables
  python scripts/init_db.py --drop    # drop and recreate (destroys all data)
"""
import argparse
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import inspect

from app.database import engine, Base
import app.models  # noqa: F401 - registers all models


def init_db(bind=engine, drop: bool = False) -> list[str]:
    """Create every mapped table on `bind` and return the table names present."""
    if drop:
        Base.metadata.drop_all(bind=bind)
    Base.metadata.create_all(bind=bind)
    return sorted(inspect(bind).get_table_names())


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--drop", action="store_true", help="Drop existing tables first")
    args = parser.parse_args()

    tables = init_db(drop=args.drop)
    print(f"Database ready at {engine.url.render_as_string(hide_password=True)}")
    for name in tables:
        print(f"  - {name}")


if __name__ == "__main__":
    main()
