"""
Analog database configuration.
Stores event-watch targets and the (empty) events sink.

Structure:
- contracts: One document per watch target (chain endpoint, contract, event topic)
- events: Declared sink for watched events, created empty with no schema
- _metadata: Database metadata
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import OperationFailure

logger = logging.getLogger(__name__)

DB_NAME = "analog_db"


class Collections:
    """Collection names in analog_db."""
    CONTRACTS = "contracts"   # Watch targets
    EVENTS = "events"         # Sink, no schema
    METADATA = "_metadata"

    # Collections the bootstrap creates explicitly
    BOOTSTRAP = ("contracts", "events")

    # Index definitions for each collection
    INDEXES = {
        "contracts": [
            {
                "keys": [("chain_endpoint", 1), ("contract_address", 1), ("event_type", 1)],
                "unique": True,
                "name": "watch_target_unique",
            },
            {"keys": [("contract_address", 1)]},
        ],
    }


async def create_analog_indexes(db: AsyncIOMotorDatabase) -> list[str]:
    """Create indexes for analog database collections. Returns index names."""
    names = []
    for collection_name, indexes in Collections.INDEXES.items():
        collection = db[collection_name]
        for index_def in indexes:
            keys = index_def["keys"]
            kwargs = {k: v for k, v in index_def.items() if k != "keys"}
            try:
                names.append(await collection.create_index(keys, **kwargs))
            except OperationFailure as e:
                # Index already exists with different options
                logger.warning(f"Index on {collection_name} {keys} not created: {e}")
    return names


# Manifest for registry
DB_MANIFEST = {
    "db_name": DB_NAME,
    "purpose": "Blockchain event-watch targets and watched events",
    "collections": [Collections.CONTRACTS, Collections.EVENTS, Collections.METADATA],
    "access_level": "standard",
}
