import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure the backend package root is on sys.path for direct pytest runs
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))


@pytest.fixture
def database(tmp_path):
    from db import Database

    db = Database(f"sqlite:///{tmp_path / 'store.db'}")
    db.ensure_index()
    yield db
    db.dispose()


@pytest.fixture
def books_client(database):
    from api.main import create_app

    # Entering the client runs the startup hook (index creation).
    with TestClient(create_app(database)) as client:
        yield client


@pytest.fixture
def people_client():
    from api.main import create_people_app
    from repositories import PeopleRepository
    from repositories.people import default_people

    with TestClient(create_people_app(PeopleRepository(default_people()))) as client:
        yield client
