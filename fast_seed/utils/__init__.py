from .console import is_cli, write
from .file_utils import with_trailing_separator

__all__ = [
    "is_cli",
    "write",
    "with_trailing_separator",
]
