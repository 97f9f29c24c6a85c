class ConfigurationException(ValueError):
    """Raised when the database config does not point at a usable seeders directory."""


class InvalidArgumentException(ValueError):
    """Raised when a seeder name is empty or cannot be resolved."""


class InvalidSeederException(InvalidArgumentException):
    def __init__(self, name: str, instance: object):
        super().__init__(
            f"Seeder `{name}` does not implement run() and set_silent() "
            f"(got {type(instance).__name__})."
        )
        self.name = name


ConfigurationError = ConfigurationException
InvalidArgument = InvalidArgumentException
