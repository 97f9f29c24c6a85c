"""Contract classes and abstract interfaces.

Exported so they can be imported directly from :mod:`fast_seed`.
"""

from .seeder import Seeder, SeedUnit

__all__ = [
    "Seeder",
    "SeedUnit",
]
