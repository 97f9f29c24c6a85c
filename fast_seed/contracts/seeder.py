"""Seeder contract for app-local database seeders."""

from __future__ import annotations

from typing import Any, Optional, Protocol, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:  # pragma: no cover
    from faker import Faker
    from fast_seed.config import DatabaseConfig
    from fast_seed.core.seed_runner import SeedRunner


@runtime_checkable
class SeedUnit(Protocol):
    """Anything the runner can execute: a `run()` and a `set_silent()`."""

    def run(self) -> Any:
        ...

    def set_silent(self, silent: bool) -> Any:
        ...


class Seeder:
    """
    Base class for application seeders.

    Subclasses override `run()` (plain or `async def`) and insert their data
    through `self.db`. Other seeders can be chained with `call()`.
    """

    def __init__(self, config: DatabaseConfig, db: Any = None) -> None:
        self.config = config
        self.db = db
        self.silent = False
        self.seed_path: Optional[str] = None

    @staticmethod
    def faker() -> Optional[Faker]:
        from fast_seed.core.faker_provider import faker
        return faker()

    def set_silent(self, silent: bool) -> Seeder:
        self.silent = bool(silent)
        return self

    def run(self) -> Any:
        """Insert the seed data. Override in subclasses."""
        return None

    def call(self, name: str) -> None:
        """Run another seeder with this seeder's config, connection and silent flag."""
        self._runner().run(name)

    async def call_async(self, name: str) -> None:
        await self._runner().run_async(name)

    def _runner(self) -> SeedRunner:
        from fast_seed.core.seed_runner import SeedRunner  # local import to avoid cycles
        runner = SeedRunner(self.config, self.db)
        if self.seed_path is not None:
            runner.set_path(self.seed_path)
        return runner.set_silent(self.silent)
