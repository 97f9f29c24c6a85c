"""Custom exceptions for fast-seed."""

from .common_exceptions import EnvMissingException, EnvInvalidException
from .seeder_exceptions import (
    ConfigurationException,
    ConfigurationError,
    InvalidArgumentException,
    InvalidArgument,
    InvalidSeederException,
)


__all__ = [
    # common
    "EnvMissingException",
    "EnvInvalidException",
    # seeder
    "ConfigurationException",
    "ConfigurationError",
    "InvalidArgumentException",
    "InvalidArgument",
    "InvalidSeederException",
]
