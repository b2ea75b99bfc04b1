"""Shared test configuration."""

import os

# The module-level engine is built on import; keep it off PostgreSQL.
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite://")
