"""Core seeding machinery re-exported for convenient access."""

from .faker_provider import faker, reset_faker
from .seed_runner import SeedRunner
from .seeder_registry import SeederRegistry

__all__ = [
    "faker",
    "reset_faker",
    "SeedRunner",
    "SeederRegistry",
]
