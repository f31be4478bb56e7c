"""
Database module - MongoDB connection and database definitions.
"""
from analog.database.connections import (
    get_mongo_client,
    close_connections,
    get_database,
    ping,
)
from analog.database.databases import analog_db, system_db

__all__ = [
    "get_mongo_client",
    "close_connections",
    "get_database",
    "ping",
    "analog_db",
    "system_db",
]
