from .mongo import connect, close, clear

__all__ = [
    "connect",
    "close",
    "clear",
]
