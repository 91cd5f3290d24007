"""Standalone script to create DB tables and the municipal admin account (ADMIN_EMAIL / ADMIN_PASSWORD)."""
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from app.database import engine, SessionLocal, Base
from app import models  # noqa: F401
from app.seed import seed_admin

if __name__ == "__main__":
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        admin = seed_admin(db)
        print(f"Admin account ready: {admin.email}" if admin else "ADMIN_EMAIL not set; nothing seeded.")
    finally:
        db.close()
