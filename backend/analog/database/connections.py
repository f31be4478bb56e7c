"""
Database connection management for MongoDB.
"""
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from typing import Optional

from analog.config import get_settings

# Global connection instance
_mongo_client: Optional[AsyncIOMotorClient] = None


async def get_mongo_client() -> AsyncIOMotorClient:
    """Get or create MongoDB client."""
    global _mongo_client
    if _mongo_client is None:
        settings = get_settings()
        _mongo_client = AsyncIOMotorClient(
            settings.mongo_uri,
            serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
        )
    return _mongo_client


async def ping() -> dict:
    """Round-trip to the server; raises on connection failure."""
    client = await get_mongo_client()
    return await client.admin.command("ping")


async def close_connections():
    """Close all database connections."""
    global _mongo_client

    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None


async def get_database(db_name: str) -> AsyncIOMotorDatabase:
    """Get a specific MongoDB database by name."""
    client = await get_mongo_client()
    return client[db_name]
