"""Seed the database with sample users and service sessions."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from datetime import timedelta
from app.database import SessionLocal, engine, Base
import app.models  # noqa: F401

from app.models.user import User
from app.models.session import ServiceSession
from app.utils.time_utils import to_db, utcnow


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.query(User).count() > 0:
            print("Database already seeded. Skipping.")
            return

        users = [
            User(id="mod001", email="moderator@example.com", first_name="Maria", last_name="Lopez", role="moderator"),
            User(id="srv001", email="server1@example.com", first_name="Joseph", last_name="Perez", role="server"),
            User(id="srv002", email="server2@example.com", first_name="Ana", last_name="Garcia", role="server"),
        ]
        db.add_all(users)
        db.flush()

        now = utcnow()
        completed = [
            ("srv001", "Sunday Mass", 3, 75),
            ("srv001", "Weekday Mass", 10, 45),
            ("srv002", "Sunday Mass", 3, 80),
            ("srv002", "Funeral", 1, 60),
        ]
        for user_id, service_type, days_ago, minutes in completed:
            clock_in = now - timedelta(days=days_ago)
            db.add(ServiceSession(
                user_id=user_id,
                clock_in_time=to_db(clock_in),
                clock_out_time=to_db(clock_in + timedelta(minutes=minutes)),
                service_type=service_type,
                duration_minutes=minutes,
                is_active=False,
            ))

        # One server is currently clocked in
        db.add(ServiceSession(
            user_id="srv002",
            clock_in_time=to_db(now - timedelta(minutes=20)),
            service_type="General Service",
            is_active=True,
        ))

        db.commit()
        print("Seed data created successfully.")
        print("  Moderator: moderator@example.com")
        print("  Servers: server1@example.com, server2@example.com")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
