#!/usr/bin/env python3
"""fast-seed CLI - Laravel-inspired database seeding."""

import argparse

from .make_command import MakeCommand
from .seed_command import SeedCommand
from .version_command import VersionCommand


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="fast-seed CLI - run and scaffold database seeders",
        prog="fast-seed"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    commands = [
        SeedCommand(),
        MakeCommand(),
        VersionCommand(),
    ]

    command_map = {}
    for command in commands:
        cmd_parser = subparsers.add_parser(command.name, help=command.help)
        command.configure_parser(cmd_parser)
        command_map[command.name] = command

    args = parser.parse_args()

    if args.command in command_map:
        command_map[args.command].execute(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
