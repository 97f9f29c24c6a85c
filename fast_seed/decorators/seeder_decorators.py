from typing import Optional, TypeVar

from fast_seed.core.seeder_registry import SeederRegistry

T = TypeVar('T')


def register_seeder(name: Optional[str] = None):
    """Register a seeder class so it can be run by its dotted name without a file lookup."""
    def decorator(seeder_cls: type[T]) -> type[T]:
        SeederRegistry.register(name or f"{seeder_cls.__module__}.{seeder_cls.__qualname__}", seeder_cls)
        return seeder_cls
    return decorator
