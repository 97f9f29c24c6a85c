from pathlib import Path

from fast_seed import DatabaseConfig
from fast_seed.database import mongo


def test_from_env_reads_environment(monkeypatch):
    monkeypatch.setenv("SEEDER_FILES_PATH", "/srv/app/database")
    monkeypatch.setenv("APP_PATH", "src")
    monkeypatch.setenv("APP_NAMESPACE", "src")
    monkeypatch.setenv("DB_GROUP", "tests")

    config = DatabaseConfig.from_env()

    assert config.files_path == "/srv/app/database"
    assert config.app_path == "src"
    assert config.app_namespace == "src"
    assert config.default_group == "tests"


def test_from_env_defaults(monkeypatch):
    for name in ("SEEDER_FILES_PATH", "APP_PATH", "APP_NAMESPACE", "DB_GROUP"):
        monkeypatch.delenv(name, raising=False)

    config = DatabaseConfig.from_env()

    assert config.files_path is None
    assert config.app_namespace == "app"
    assert config.default_group == "default"
    assert Path(config.default_files_path()) == Path("app") / "db"


def test_connect_delegates_to_mongo(monkeypatch):
    calls = []
    monkeypatch.setattr(mongo, "connect", lambda group, connections: calls.append((group, connections)) or "db")
    config = DatabaseConfig(default_group="main", connections={"main": {"uri": "mongodb://x"}})

    assert config.connect() == "db"
    assert config.connect("other") == "db"
    assert calls == [("main", config.connections), ("other", config.connections)]


def test_defaults_are_read_when_config_is_built(monkeypatch):
    monkeypatch.setenv("APP_NAMESPACE", "loaded_later")
    monkeypatch.setenv("DB_GROUP", "analytics")

    config = DatabaseConfig()

    assert config.app_namespace == "loaded_later"
    assert config.default_group == "analytics"
    assert config.files_path is None
