"""Resolve seeders by name and run them against the configured database."""

from __future__ import annotations

import asyncio
import importlib
import importlib.util
import inspect
import logging
import sys
from pathlib import Path
from types import ModuleType
from typing import Any, Optional, TYPE_CHECKING

from fast_seed.contracts.seeder import Seeder, SeedUnit
from fast_seed.core.seeder_registry import SeederRegistry
from fast_seed.exceptions import (
    ConfigurationException,
    InvalidArgumentException,
    InvalidSeederException,
)
from fast_seed.utils.console import is_cli, write
from fast_seed.utils.file_utils import with_trailing_separator
from fast_seed.utils.serialisation import pascal_case_to_snake_case, remove_suffix

if TYPE_CHECKING:
    from fast_seed.config import DatabaseConfig

SEEDERS_DIRECTORY = "seeders"
SEEDERS_MODULE = "db.seeders"
SEEDER_EXTENSION = ".py"


class SeedRunner:
    """
    Loads a seeder by name and runs it.

    Bare names (``UserSeeder``) are looked up as files in the seeders directory,
    dotted names (``app.db.seeders.user_seeder.UserSeeder``) are resolved
    through the registry or imported directly.
    """

    def __init__(self, config: DatabaseConfig, db: Any = None, *, seed_path: Optional[str] = None) -> None:
        if seed_path is not None:
            # Explicit seeders directory, used as is
            if not seed_path:
                raise ConfigurationException("Invalid seeders directory given.")
            self._seed_path = with_trailing_separator(str(seed_path))
        else:
            files_path = config.files_path if config.files_path is not None else config.default_files_path()
            if not files_path:
                raise ConfigurationException("Invalid files_path set in the database config.")
            self._seed_path = with_trailing_separator(str(files_path)) + SEEDERS_DIRECTORY + "/"

        if not Path(self._seed_path).is_dir():
            raise ConfigurationException(
                f"Unable to locate the seeders directory: {self._seed_path}. "
                "Please check DatabaseConfig.files_path"
            )

        self.config = config
        self.db = db if db is not None else config.connect(config.default_group)
        self.silent = False

    @property
    def seed_path(self) -> str:
        return self._seed_path

    def set_path(self, path: str) -> SeedRunner:
        """Point bare seeder names at another directory. Existence is not checked."""
        self._seed_path = with_trailing_separator(str(path))
        return self

    def set_silent(self, silent: bool) -> SeedRunner:
        self.silent = bool(silent)
        return self

    def run(self, name: str) -> None:
        """
        Load the named seeder and run it.

        Coroutine seeders are driven with ``asyncio.run``; inside a running
        event loop use :meth:`run_async` instead.

        Raises:
            InvalidArgumentException: If the name is empty or does not resolve.
        """
        qualified_name, seeder = self._prepare(name)

        outcome = seeder.run()
        if inspect.isawaitable(outcome):
            self._run_awaitable(outcome, qualified_name)

        del seeder
        self._report(qualified_name)

    async def run_async(self, name: str) -> None:
        qualified_name, seeder = self._prepare(name)

        outcome = seeder.run()
        if inspect.isawaitable(outcome):
            await outcome

        del seeder
        self._report(qualified_name)

    def _prepare(self, name: str) -> tuple[str, SeedUnit]:
        if not name:
            raise InvalidArgumentException("No seeder was specified.")

        name = remove_suffix(name, SEEDER_EXTENSION)

        if "." in name:
            qualified_name = name
            factory = self._resolve_qualified(name)
        else:
            qualified_name, factory = self._resolve_local(name)

        if not callable(factory):
            raise InvalidSeederException(qualified_name, factory)

        logging.debug(f"Running seeder {qualified_name}")
        seeder = factory(self.config)
        if isinstance(seeder, Seeder):
            seeder.db = self.db
            seeder.seed_path = self._seed_path

        if not isinstance(seeder, SeedUnit) or not callable(seeder.run) or not callable(seeder.set_silent):
            raise InvalidSeederException(qualified_name, seeder)

        seeder.set_silent(self.silent)
        return qualified_name, seeder

    def _resolve_qualified(self, name: str) -> Any:
        factory = SeederRegistry.get(name)
        if factory is not None:
            return factory

        module_name, _, attribute = name.rpartition(".")
        # Relative (`.UserSeeder`) and malformed (`app..UserSeeder`) names cannot be imported
        if not attribute or any(not part for part in module_name.split(".")):
            raise InvalidArgumentException(f"Invalid seeder name: {name}")

        try:
            module = importlib.import_module(module_name)
        except ModuleNotFoundError as exc:
            # Only translate a missing seeder module, not a missing import inside it
            if exc.name is None or not (module_name == exc.name or module_name.startswith(f"{exc.name}.")):
                raise
            raise InvalidArgumentException(f"Unable to import seeder module: {module_name}") from exc

        factory = getattr(module, attribute, None)
        if factory is None:
            raise InvalidArgumentException(f"Seeder `{attribute}` not found in module {module_name}")
        return factory

    def _resolve_local(self, name: str) -> tuple[str, Any]:
        path = self._locate_file(name)
        module_name = f"{self.config.app_namespace}.{SEEDERS_MODULE}.{path.stem}"
        qualified_name = f"{module_name}.{name}"

        factory = SeederRegistry.get(qualified_name)
        if factory is not None:
            return qualified_name, factory

        module = self._load_module(module_name, path)

        factory = SeederRegistry.get(qualified_name) or self._find_seeder_class(module, name)
        if factory is None:
            raise InvalidArgumentException(f"No seeder class `{name}` found in {path}")
        return qualified_name, factory

    def _locate_file(self, name: str) -> Path:
        path = Path(f"{self._seed_path}{name}{SEEDER_EXTENSION}")
        if path.is_file():
            return path

        # Seeder files are usually snake_case (user_seeder.py for UserSeeder)
        snake_path = Path(f"{self._seed_path}{pascal_case_to_snake_case(name)}{SEEDER_EXTENSION}")
        if snake_path.is_file():
            return snake_path

        raise InvalidArgumentException(f"The specified seeder is not a valid file: {path}")

    def _load_module(self, module_name: str, path: Path) -> ModuleType:
        module = sys.modules.get(module_name)
        if module is not None:
            return module

        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise InvalidArgumentException(f"Unable to load seeder module: {path}")

        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except BaseException:
            sys.modules.pop(module_name, None)
            raise
        return module

    def _find_seeder_class(self, module: ModuleType, name: str) -> Optional[Any]:
        cls = getattr(module, name, None)
        if cls is not None:
            return cls
        # Fallback: a class named `Seeder` defined in the module itself
        fallback = getattr(module, "Seeder", None)
        if isinstance(fallback, type) and issubclass(fallback, Seeder) and fallback is not Seeder:
            return fallback
        return None

    def _run_awaitable(self, outcome: Any, qualified_name: str) -> None:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            pass
        else:
            if inspect.iscoroutine(outcome):
                outcome.close()
            raise RuntimeError(
                f"Seeder {qualified_name} is async and an event loop is already running. "
                "Use `await runner.run_async(...)` instead."
            )

        async def _await() -> Any:
            return await outcome

        asyncio.run(_await())

    def _report(self, qualified_name: str) -> None:
        logging.info(f"Seeded: {qualified_name}")
        if is_cli() and not self.silent:
            write(f"Seeded: {qualified_name}", "green")
