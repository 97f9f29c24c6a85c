"""Create a seeder from the template."""

import argparse
import re
from pathlib import Path

from fast_seed.config import DatabaseConfig
from fast_seed.core.seed_runner import SEEDERS_DIRECTORY
from fast_seed.utils.file_utils import resolve_cli_path
from fast_seed.utils.serialisation import (
    pascal_case_to_snake_case,
    snake_case_to_pascal_case,
    is_pascal_case,
    is_snake_case,
)
from .command_base import CommandBase

TEMPLATES_PATH = Path(__file__).parent.parent / "templates"


class MakeCommand(CommandBase):
    """Command to create seeder files from the template."""

    @property
    def name(self) -> str:
        return "make"

    @property
    def help(self) -> str:
        return "Create a seeder in app/db/seeders"

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("name", help="Seeder class name (e.g., UserSeeder or user_seeder)")
        parser.add_argument(
            "--path",
            help="Override destination directory (relative to project root)",
        )

    def execute(self, args: argparse.Namespace) -> None:
        template_path = TEMPLATES_PATH / "make" / "seeder.py"
        if not template_path.exists():
            print(f"❌ Template not found: {template_path}")
            return

        # Determine provided name style; default to snake_case if uncertain
        if is_pascal_case(args.name):
            class_name = args.name
            file_name = pascal_case_to_snake_case(class_name)
        else:
            class_name = snake_case_to_pascal_case(args.name)
            file_name = args.name if is_snake_case(args.name) else pascal_case_to_snake_case(class_name)

        content = re.sub(r'\bNewClass\b', class_name, template_path.read_text(encoding='utf-8'))

        config = DatabaseConfig.from_env()
        default_dir = Path(config.files_path or config.default_files_path()) / SEEDERS_DIRECTORY
        try:
            dest_dir = resolve_cli_path(args.path, default_dir)
        except ValueError as exc:
            print(f"❌ {exc}")
            return
        dest_file = dest_dir / f"{file_name}.py"

        if dest_file.exists():
            print(f"❌ File exists: {dest_file}")
            return

        dest_file.parent.mkdir(parents=True, exist_ok=True)
        dest_file.write_text(content, encoding='utf-8')

        print(f"✅ Created seeder: {dest_file}")
