from typing import Any, Callable, Dict, Optional

SeederFactory = Callable[[Any], Any]


class SeederRegistry:
    """Process-wide mapping of qualified seeder names to factories."""

    _factories: Dict[str, SeederFactory] = {}

    @classmethod
    def register(cls, name: str, factory: SeederFactory) -> None:
        """Register a factory (usually a Seeder subclass) under a dotted name."""
        if not name:
            raise ValueError("Seeder name must not be empty")
        cls._factories[name] = factory

    @classmethod
    def unregister(cls, name: str) -> None:
        cls._factories.pop(name, None)

    @classmethod
    def get(cls, name: str) -> Optional[SeederFactory]:
        return cls._factories.get(name)

    @classmethod
    def has(cls, name: str) -> bool:
        return name in cls._factories

    @classmethod
    def names(cls) -> list[str]:
        return sorted(cls._factories)

    @classmethod
    def clear(cls) -> None:
        cls._factories.clear()
