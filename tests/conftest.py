"""Test configuration and fixtures."""

import os

# Test defaults; must be set before Settings() is first instantiated
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret-key-that-is-long-enough")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")
os.environ.setdefault("OBSERVABILITY__SEND_TO_LOGFIRE", "false")

import logfire  # noqa: E402

# Logfire must be configured before the app module is imported
logfire.configure(send_to_logfire=False, console=False)

import pytest  # noqa: E402
from sqlalchemy import create_engine as create_sync_engine  # noqa: E402

from agora.persistence.tables import metadata  # noqa: E402


@pytest.fixture
def sqlite_database_url(tmp_path, monkeypatch) -> str:
    """Fresh SQLite database with the full schema, exposed as DATABASE__URL.

    The schema is created with the synchronous driver so the fixture works
    for both async tests and ``TestClient`` tests.
    """
    path = tmp_path / "agora.db"
    engine = create_sync_engine(f"sqlite:///{path}")
    metadata.create_all(engine)
    engine.dispose()

    url = f"sqlite+aiosqlite:///{path}"
    monkeypatch.setenv("DATABASE__URL", url)
    return url
