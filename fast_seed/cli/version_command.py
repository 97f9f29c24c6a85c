"""Show version information."""

import argparse
from importlib import metadata as importlib_metadata

import fast_seed
from .command_base import CommandBase


class VersionCommand(CommandBase):
    """Command to show version information."""

    @property
    def name(self) -> str:
        return "version"

    @property
    def help(self) -> str:
        return "Show version information"

    def _get_version(self) -> str:
        """Resolve version from package metadata, fallback to the package attribute."""
        try:
            return importlib_metadata.version("fast-seed")
        except importlib_metadata.PackageNotFoundError:
            return fast_seed.__version__

    def execute(self, args: argparse.Namespace) -> None:
        print(f"fast-seed v{self._get_version()}")
