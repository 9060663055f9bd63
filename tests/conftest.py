"""
Test configuration and fixtures.
"""
import os

import pytest

# In-memory database, set before models/ creates the storage singleton
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["APP_ENV"] = "test"

from chirpy import create_app
from models import storage
from models.base_model import Base

DEFAULT_EMAIL = "walt@breakingbad.com"
DEFAULT_PASSWORD = "04234"


@pytest.fixture()
def app(tmp_path):
    app = create_app("test")
    app.config["FILESERVER_ROOT"] = str(tmp_path)
    yield app

    # Empty every table so tests stay independent
    session = storage.get_session()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    storage.close()


@pytest.fixture()
def client(app):
    with app.test_client() as c:
        yield c


@pytest.fixture()
def create_user(client):
    def _create(email=DEFAULT_EMAIL, password=DEFAULT_PASSWORD):
        resp = client.post("/api/users", json={"email": email, "password": password})
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()

    return _create


@pytest.fixture()
def login(client, create_user):
    """Register (once per email) and log in; returns the login payload."""
    registered = set()

    def _login(email=DEFAULT_EMAIL, password=DEFAULT_PASSWORD):
        if email not in registered:
            create_user(email, password)
            registered.add(email)
        resp = client.post("/api/login", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.get_json()
        return resp.get_json()

    return _login


@pytest.fixture()
def bearer():
    def _bearer(token):
        return {"Authorization": f"Bearer {token}"}

    return _bearer
