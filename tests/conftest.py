"""Point the app at a throwaway SQLite file before any backoffice module is imported."""

import os
import sys
import tempfile
from pathlib import Path

_test_db_file = tempfile.NamedTemporaryFile(suffix=".sqlite", delete=False)
_test_db_file.close()
os.environ["DATABASE_URL"] = f"sqlite:///{_test_db_file.name}"
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("SEED_ON_INIT", "false")

# Allow importing backoffice when running from the project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))


def pytest_sessionfinish(session, exitstatus):
    try:
        os.unlink(_test_db_file.name)
    except OSError:
        pass
