import logging
import os
from typing import Any, Dict, Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from fast_seed.exceptions import EnvMissingException

_clients: Dict[str, AsyncIOMotorClient] = {}


def _default_db_name() -> str:
    if os.getenv('TEST_ENV'):
        return os.getenv('TEST_DB_NAME', 'test_db')
    return os.getenv('DB_NAME', 'db')


def connect(group: str = "default", connections: Optional[Dict[str, Dict[str, Any]]] = None) -> AsyncIOMotorDatabase:
    """
    Return the database for a connection group.

    Group settings (`uri`, `database`) fall back to MONGO_URI and DB_NAME.
    Clients are shared per URI for the lifetime of the process.
    """
    settings = (connections or {}).get(group, {})
    uri = settings.get("uri") or os.getenv('MONGO_URI')
    if not uri:
        raise EnvMissingException("MONGO_URI")

    db_name = settings.get("database") or _default_db_name()

    client = _clients.get(uri)
    if client is None:
        client = AsyncIOMotorClient(uri, tz_aware=True)
        _clients[uri] = client

    logging.debug(f"Connected to MongoDB database: {db_name} (group: {group})")
    return client[db_name]


def close() -> None:
    for client in _clients.values():
        client.close()
    _clients.clear()


def clear() -> None:
    _clients.clear()
