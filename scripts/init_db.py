"""
Database initialization script.

Creates the tables straight from the models, for a local development
database.  Use ``alembic upgrade head`` everywhere else.

Usage:
    DATABASE_URL_OVERRIDE=sqlite:///./fitcoach.db python scripts/init_db.py
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from sqlalchemy.exc import SQLAlchemyError

from fitcoach.db.init_db import init_db

if __name__ == "__main__":
    print("=" * 50)
    print("Fitcoach Database Initialization")
    print("=" * 50)
    print()

    try:
        init_db()
    except SQLAlchemyError as e:
        print()
        print("=" * 50)
        print("ERROR: Database initialization failed!")
        print(f"Details: {e}")
        print("=" * 50)
        sys.exit(1)

    print()
    print("=" * 50)
    print("SUCCESS: Database initialized!")
    print("=" * 50)
