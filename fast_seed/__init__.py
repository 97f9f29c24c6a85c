"""
fast-seed - database seeders for Laravel-style Python applications

This package provides:
- A Seeder base class for app-local seeders (app/db/seeders)
- SeedRunner, which resolves seeders by name and runs them
- A registry and decorator for running seeders by dotted name
- A shared Faker accessor for generating seed data
- The `fast-seed` command line tool

Think of it as Laravel's `db:seed` for Python applications.
"""

__version__ = "0.1.0"
__author__ = "Patrik Mojzis"
__email__ = "patrikm53@gmail.com"
__license__ = "MIT"
__url__ = "https://github.com/patrikmojzis/fast-seed"

from .contracts import *  # noqa: F401,F403
from .core import *  # noqa: F401,F403
from .config import DatabaseConfig  # noqa: F401
from .decorators import *  # noqa: F401,F403
from .exceptions import *  # noqa: F401,F403
