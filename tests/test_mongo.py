import pytest

from fast_seed.database import mongo
from fast_seed.exceptions import EnvMissingException


class FakeClient:
    def __init__(self, uri, **kwargs):
        self.uri = uri
        self.kwargs = kwargs
        self.closed = False

    def __getitem__(self, name):
        return (self.uri, name)

    def close(self):
        self.closed = True


@pytest.fixture(autouse=True)
def fake_motor(monkeypatch):
    monkeypatch.setattr(mongo, "AsyncIOMotorClient", FakeClient)
    for name in ("MONGO_URI", "DB_NAME", "TEST_ENV", "TEST_DB_NAME"):
        monkeypatch.delenv(name, raising=False)
    mongo.clear()
    yield
    mongo.clear()


def test_connect_requires_mongo_uri():
    with pytest.raises(EnvMissingException, match="MONGO_URI"):
        mongo.connect()


def test_connect_uses_environment(monkeypatch):
    monkeypatch.setenv("MONGO_URI", "mongodb://localhost:27017")
    monkeypatch.setenv("DB_NAME", "shop")

    assert mongo.connect() == ("mongodb://localhost:27017", "shop")


def test_connect_uses_test_database(monkeypatch):
    monkeypatch.setenv("MONGO_URI", "mongodb://localhost:27017")
    monkeypatch.setenv("TEST_ENV", "1")

    assert mongo.connect() == ("mongodb://localhost:27017", "test_db")


def test_connect_group_settings_override_environment(monkeypatch):
    monkeypatch.setenv("MONGO_URI", "mongodb://localhost:27017")
    connections = {"reporting": {"uri": "mongodb://reports:27017", "database": "reports"}}

    assert mongo.connect("reporting", connections) == ("mongodb://reports:27017", "reports")
    assert mongo.connect("default", connections) == ("mongodb://localhost:27017", "db")


def test_clients_are_cached_and_closed(monkeypatch):
    monkeypatch.setenv("MONGO_URI", "mongodb://localhost:27017")
    mongo.connect()
    mongo.connect()

    clients = list(mongo._clients.values())
    assert len(clients) == 1
    assert clients[0].kwargs == {"tz_aware": True}

    mongo.close()
    assert clients[0].closed
    assert mongo._clients == {}
