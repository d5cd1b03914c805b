import pytest

from api import create_app
from api.config import TestConfig
from api.models import db

API = "/api/v1"

# fresh in-memory database per test
@pytest.fixture()
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.drop_all()
        db.engine.dispose()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def storage(app):
    with app.app_context():
        yield app.extensions["storage"]


@pytest.fixture()
def make_actor(client):
    def inner(name, **fields):
        resp = client.post(f"{API}/actor", json={"name": name, **fields})
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()
    return inner


@pytest.fixture()
def make_film(client):
    def inner(name, **fields):
        resp = client.post(f"{API}/film", json={"name": name, **fields})
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()
    return inner
