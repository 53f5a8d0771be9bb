"""
Shared test configuration.

Settings are read once at import time, so the environment must point at
the test database before anything under ``src`` is imported.

Every test gets a throwaway SQLite file; PostgreSQL is only needed in
deployment.
"""

import os
import tempfile
from pathlib import Path

_TEST_DB_DIR = Path(tempfile.mkdtemp(prefix="primer-tests-"))

os.environ["APP_ENV"] = "test"
os.environ["DEBUG"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_DIR / 'primer.db'}"
os.environ["DATABASE_AUTO_CREATE"] = "true"
os.environ["SECRET_KEY"] = "test-secret-key-do-not-use-in-production"
