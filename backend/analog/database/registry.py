"""
Database registry management.
Ensures all databases and collections are registered on bootstrap.
"""
from datetime import datetime, timezone
from motor.motor_asyncio import AsyncIOMotorClient

from analog.database.databases import analog_db, system_db

SCHEMA_VERSION = "1.0"

# All database manifests
ALL_DB_MANIFESTS = [
    analog_db.DB_MANIFEST,
    system_db.DB_MANIFEST,
]


async def sync_registry(client: AsyncIOMotorClient) -> list[str]:
    """
    Synchronize the database registry.
    Ensures all databases are registered in system_db.db_registry and
    returns the registered database names.
    """
    sys_db = client[system_db.DB_NAME]
    registry_collection = sys_db[system_db.Collections.DB_REGISTRY]
    registered = []

    for manifest in ALL_DB_MANIFESTS:
        db_name = manifest["db_name"]
        now = datetime.now(timezone.utc)

        # Upsert database entry
        await registry_collection.update_one(
            {"_id": db_name},
            {
                "$set": {
                    "purpose": manifest["purpose"],
                    "collections": manifest["collections"],
                    "access_level": manifest["access_level"],
                    "schema_version": SCHEMA_VERSION,
                    "updated_at": now,
                },
                "$setOnInsert": {
                    "created_at": now,
                }
            },
            upsert=True,
        )

        # Ensure _metadata collection exists in each database
        db = client[db_name]
        metadata_collection = db["_metadata"]
        await metadata_collection.update_one(
            {"_id": "db_metadata"},
            {
                "$set": {
                    "db_name": db_name,
                    "last_updated_at": now,
                },
                "$setOnInsert": {
                    "created_at": now,
                }
            },
            upsert=True,
        )
        registered.append(db_name)

    return registered


async def create_indexes(client: AsyncIOMotorClient) -> list[str]:
    """Create necessary indexes for all databases."""
    return await analog_db.create_analog_indexes(client[analog_db.DB_NAME])
