"""Shared Faker instance for seeders."""

from __future__ import annotations

import threading
from typing import Optional

try:  # pragma: no cover - import guard for optional faker dependency
    from faker import Faker as _Faker  # type: ignore
except ModuleNotFoundError:  # pragma: no cover
    _Faker = None  # type: ignore

_instance: Optional["_Faker"] = None
_lock = threading.Lock()


def faker() -> Optional["_Faker"]:
    """
    Return the process-wide Faker generator, building it on first use.

    Returns None when the optional `Faker` distribution is not installed.
    """
    global _instance
    if _instance is None and _Faker is not None:
        with _lock:
            if _instance is None:
                _instance = _Faker()
    return _instance


def reset_faker() -> None:
    global _instance
    with _lock:
        _instance = None
