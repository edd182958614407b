# ruff: noqa: E402
# File: /tests/conftest.py | Version: 2.0
import pathlib
import sys

# Make repo root importable as "workspace_service"
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, delete

from workspace_service.db.base_class import Base
from workspace_service.main import app
from workspace_service.models.view import ViewTable


@pytest.fixture(scope="session")
def _session_engine(tmp_path_factory):
    db_file = tmp_path_factory.mktemp("db") / "test.db"
    test_engine = create_engine(
        f"sqlite:///{db_file}", connect_args={"check_same_thread": False}
    )
    Base.metadata.create_all(bind=test_engine)
    try:
        yield test_engine
    finally:
        Base.metadata.drop_all(bind=test_engine)
        test_engine.dispose()


@pytest.fixture()
def engine(_session_engine):
    try:
        yield _session_engine
    finally:
        with _session_engine.begin() as conn:
            conn.execute(delete(ViewTable))


@pytest.fixture()
def broken_engine(tmp_path):
    # Parent directory does not exist, so every connection attempt fails
    bad = create_engine(f"sqlite:///{tmp_path / 'missing' / 'nope.db'}")
    try:
        yield bad
    finally:
        bad.dispose()


@pytest.fixture()
def client(engine):
    from workspace_service.db.session import get_engine  # late import to avoid circulars

    app.dependency_overrides[get_engine] = lambda: engine
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
