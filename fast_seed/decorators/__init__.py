from .seeder_decorators import register_seeder

__all__ = [
    "register_seeder",
]
