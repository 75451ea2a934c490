#!/usr/bin/env python3
"""
Script to make a user an admin.
Usage: python make_admin.py <username>
"""

import argparse
import sys

from sqlalchemy.exc import SQLAlchemyError

from fusion_order.db.database import SessionLocal
from fusion_order.domain.enums import UserRole
from fusion_order.infrastructure.orm import UserModel


def make_user_admin(username: str, session_factory=SessionLocal) -> bool:
    """Promote an existing user to ADMIN by username."""
    db = session_factory()

    try:
        user = db.query(UserModel).filter(UserModel.username == username).first()
        if user is None:
            print(f"❌ User '{username}' not found!")
            return False

        if user.role == UserRole.ADMIN:
            print(f"ℹ️  '{username}' is already an admin")
            return True

        user.role = UserRole.ADMIN
        db.commit()
        print(f"✅ Successfully made '{username}' an admin!")
        return True

    except SQLAlchemyError as e:
        print(f"❌ Error: {e}")
        db.rollback()
        return False
    finally:
        db.close()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Promote an existing user to ADMIN")
    parser.add_argument("username", help="username of the account to promote")
    args = parser.parse_args(argv)

    print(f"🔑 Making {args.username} an admin...")
    return 0 if make_user_admin(args.username) else 1


if __name__ == "__main__":
    sys.exit(main())
