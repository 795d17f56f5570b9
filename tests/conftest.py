# File: tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from portal.core.config import Settings
from portal.db.init_db import init_db
from portal.db.session import Database
from portal.main import create_application


@pytest.fixture
def test_settings(tmp_path):
    return Settings(database_url=f"sqlite:///{tmp_path / 'portal-test.db'}")


@pytest.fixture
def database(test_settings):
    db = Database(test_settings.database_url)
    db.connect()
    init_db(db)
    yield db
    db.close()


@pytest.fixture
def session(database):
    db = database.session()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(test_settings):
    app = create_application(test_settings)
    # Entering the context runs the lifespan (connect + create tables).
    with TestClient(app) as c:
        yield c


@pytest.fixture
def create_user(client):
    def _create(name="Ann", email="ann@x.com"):
        return client.post("/users", data={"name": name, "email": email}, follow_redirects=False)

    return _create
