"""Run a database seeder from app/db/seeders."""

import argparse
import asyncio
import logging
import sys

from fast_seed.app_provider import boot
from fast_seed.config import DatabaseConfig
from fast_seed.core.seed_runner import SeedRunner
from fast_seed.database.mongo import close
from fast_seed.exceptions import ConfigurationException, EnvMissingException, InvalidArgumentException
from fast_seed.utils.file_utils import resolve_cli_path
from .command_base import CommandBase


class SeedCommand(CommandBase):
    @property
    def name(self) -> str:
        return "seed"

    @property
    def help(self) -> str:
        return "Run a database seeder (app/db/seeders/<name>.py or a dotted name)"

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("name", help="Seeder name (e.g., UserSeeder or app.db.seeders.user_seeder.UserSeeder)")
        parser.add_argument(
            "--path",
            help="Override seeders directory (relative to project root)",
        )
        parser.add_argument(
            "--silent",
            action="store_true",
            help="Do not print the `Seeded:` status line",
        )
        parser.add_argument(
            "--env-file",
            dest="env_file",
            help="Environment file to load instead of .env.<ENV> / .env",
        )

    def execute(self, args: argparse.Namespace) -> None:
        try:
            boot(env_file_name=getattr(args, "env_file", None))
            seed_path = str(resolve_cli_path(args.path, ".")) if args.path else None
            runner = SeedRunner(DatabaseConfig.from_env(), seed_path=seed_path)
        except (ConfigurationException, EnvMissingException, ValueError) as exc:
            print(f"❌ {exc}")
            sys.exit(1)

        runner.set_silent(getattr(args, "silent", False))

        try:
            asyncio.run(runner.run_async(args.name))
        except InvalidArgumentException as exc:
            print(f"❌ {exc}")
            sys.exit(1)
        except Exception as exc:  # noqa: BLE001
            logging.exception(f"Seeder {args.name} failed")
            print(f"❌ Seeder failed: {exc}")
            sys.exit(1)
        finally:
            close()
