"""
database.py – Motor client helpers
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection

from ..core.config import get_settings

log = logging.getLogger(__name__)

_client: Optional[AsyncIOMotorClient] = None
_uri: Optional[str] = None


def connect(uri: Optional[str] = None) -> AsyncIOMotorClient:
    """
    Open (or reuse) the process-wide Motor client.

    • falls back to settings.mongo_uri – a pydantic MongoDsn → cast to str.
    • uuidRepresentation="standard" keeps UUIDs driver-default.
    """
    global _client, _uri
    uri = uri or str(get_settings().mongo_uri)
    if _client is not None and uri == _uri:
        return _client
    if _client is not None:
        _client.close()
    _client = AsyncIOMotorClient(uri, uuidRepresentation="standard")
    _uri = uri
    log.info("mongo client opened")
    return _client


def disconnect() -> None:
    global _client
    if _client is None:
        return
    _client.close()
    _client = None
    log.info("mongo client closed")


def get_db():
    """Default database named in the URI; reconnects if the client was closed."""
    client = _client if _client is not None else connect(_uri)
    return client.get_default_database()


def get_collection(name: str) -> AsyncIOMotorCollection:
    return get_db()[name]


def get_users_collection() -> AsyncIOMotorCollection:
    """FastAPI dependency – tests swap this for an in-memory fake."""
    return get_collection(get_settings().users_collection)
