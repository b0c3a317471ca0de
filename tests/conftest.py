"""
Point the app at a throwaway SQLite file before anything imports it.
"""
import os
import tempfile

_TEST_DIR = tempfile.mkdtemp(prefix="autodetail-tests-")

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(_TEST_DIR, "test.db")
os.environ.setdefault("LOG_LEVEL", "WARNING")
