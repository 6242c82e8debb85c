"""Grant (or revoke) the moderator role for an existing user.

New users always start as servers, so the first moderator has to be
promoted from the command line.

Usage:
  python scripts/promote_moderator.py someone@example.com
  python scripts/promote_moderator.py someone@example.com --role server
"""
import argparse
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.database import SessionLocal
from app.services import user_service
from app.utils.permissions import ALL_ROLES, MODERATOR


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("email", help="Email of the user to update")
    parser.add_argument("--role", choices=ALL_ROLES, default=MODERATOR)
    args = parser.parse_args()

    db = SessionLocal()
    try:
        user = user_service.get_user_by_email(db, args.email)
        if not user:
            print(f"No user with email {args.email}. They must sign in once first.")
            sys.exit(1)
        user.role = args.role
        db.commit()
        print(f"{user.email} is now a {user.role}.")
    finally:
        db.close()


if __name__ == "__main__":
    main()
