"""
Database initialization.

Creates all tables directly from the SQLModel metadata.  Use Alembic for
anything beyond a throwaway development database.
"""

from fitcoach.db.base import metadata
from fitcoach.db.session import engine


def init_db() -> None:
    print("Creating database tables...")
    metadata.create_all(engine)
    print("✓ Tables created successfully")


if __name__ == "__main__":
    init_db()
