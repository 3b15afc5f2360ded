"""Root conftest: one throwaway SQLite database per test."""

import os
import tempfile

# Importing app.main builds the module-level app; keep its default DB out of the repo.
os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="ledger-test-"))

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.db.dal import Database
from app.db.migrate import apply_migrations
from app.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    s = Settings(data_dir=tmp_path, db_filename="test.sqlite3")
    s.init_post_load()
    return s


@pytest.fixture
def db(settings) -> Database:
    apply_migrations(settings.db_path)
    return Database(settings.db_path)


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as c:
        yield c
