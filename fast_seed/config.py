import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional


def _env(name: str, default: Optional[str] = None) -> Callable[[], Optional[str]]:
    # Read when the config is built, so values loaded by boot() from .env apply
    return lambda: os.getenv(name, default)


@dataclass
class DatabaseConfig:
    """
    Database settings shared by the seed runner and every seeder it runs.

    - files_path: base directory holding `seeders/` (SEEDER_FILES_PATH, defaults to <app_path>/db/)
    - app_path: application root, relative to the working directory unless absolute (APP_PATH)
    - app_namespace: import root of the application package (APP_NAMESPACE)
    - default_group: connection group used when no connection is given (DB_GROUP)
    """

    files_path: Optional[str] = None
    app_path: str = field(default_factory=_env("APP_PATH", "app"))
    app_namespace: str = field(default_factory=_env("APP_NAMESPACE", "app"))
    default_group: str = field(default_factory=_env("DB_GROUP", "default"))
    connections: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def from_env(cls) -> "DatabaseConfig":
        return cls(files_path=os.getenv("SEEDER_FILES_PATH"))

    def default_files_path(self) -> str:
        return str(Path(self.app_path) / "db")

    def connect(self, group: Optional[str] = None):
        from fast_seed.database.mongo import connect  # local import keeps motor lazy
        return connect(group or self.default_group, self.connections)
