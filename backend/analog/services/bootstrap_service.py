"""
Bootstrap service: prepares analog_db and seeds the default watch target.

A bootstrap run:
- registers analog_db and system_db in system_db.db_registry
- creates the contracts and events collections when missing
- ensures the watch-target indexes
- upserts the seed watch target taken from settings

Every step is idempotent, so running it against an initialized database only
refreshes timestamps.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import CollectionInvalid

from analog.config import Settings, get_settings
from analog.database.databases import analog_db
from analog.database.registry import create_indexes, sync_registry
from analog.schemas.bootstrap import (
    BootstrapReport,
    CollectionReport,
    VerificationReport,
)
from analog.schemas.watch_target import WatchTargetCreate

logger = logging.getLogger(__name__)


class BootstrapService:
    """Service for database initialization and its verification."""

    def __init__(self, client: AsyncIOMotorClient, settings: Optional[Settings] = None):
        """Initialize with a MongoDB client and optional settings override."""
        self.client = client
        self.settings = settings or get_settings()
        self.db = client[analog_db.DB_NAME]
        self.contracts = self.db[analog_db.Collections.CONTRACTS]
        self.events = self.db[analog_db.Collections.EVENTS]

    def seed_target(self) -> WatchTargetCreate:
        """Build the seed watch target from settings."""
        return WatchTargetCreate(
            chain_endpoint=self.settings.seed_chain_endpoint,
            contract_address=self.settings.seed_contract_address,
            event_type=self.settings.seed_event_type,
        )

    # ==================== Steps ====================

    async def ensure_collections(self) -> CollectionReport:
        """Create the bootstrap collections that do not exist yet."""
        report = CollectionReport()
        present = set(await self.db.list_collection_names())

        for name in analog_db.Collections.BOOTSTRAP:
            if name in present:
                report.existing.append(name)
                continue
            try:
                await self.db.create_collection(name)
                report.created.append(name)
                logger.info(f"Created collection {analog_db.DB_NAME}.{name}")
            except CollectionInvalid:
                # Created concurrently since list_collection_names
                report.existing.append(name)

        return report

    async def create_indexes(self) -> list[str]:
        """Ensure indexes on analog_db collections."""
        return await create_indexes(self.client)

    async def seed_watch_target(self, target: Optional[WatchTargetCreate] = None) -> bool:
        """
        Upsert a watch target, the settings seed by default.

        Returns:
            True if a document was inserted, False if it was already present
        """
        target = target or self.seed_target()
        now = datetime.now(timezone.utc)

        result = await self.contracts.update_one(
            target.model_dump(),
            {
                "$set": {"updated_at": now},
                "$setOnInsert": {"created_at": now},
            },
            upsert=True,
        )
        inserted = result.upserted_id is not None
        if inserted:
            logger.info(
                f"Seeded watch target {target.contract_address} "
                f"event {target.event_type} on {target.chain_endpoint}"
            )
        else:
            logger.debug(f"Seed watch target {target.contract_address} already present")
        return inserted

    # ==================== Full run ====================

    async def bootstrap(self, seed: bool = True) -> BootstrapReport:
        """Run every bootstrap step and summarize what happened."""
        logger.info(f"Bootstrapping {analog_db.DB_NAME}")

        registered = await sync_registry(self.client)
        collections = await self.ensure_collections()
        indexes = await self.create_indexes()
        seed_inserted = await self.seed_watch_target() if seed else False

        report = BootstrapReport(
            db_name=analog_db.DB_NAME,
            collections=collections,
            indexes=indexes,
            registered_databases=registered,
            seed_inserted=seed_inserted,
            seed_skipped=not seed,
            finished_at=datetime.now(timezone.utc),
        )
        logger.info(
            f"Bootstrap complete: created={collections.created} "
            f"existing={collections.existing} seed_inserted={seed_inserted}"
        )
        return report

    async def verify(self) -> VerificationReport:
        """Check that both collections exist and the seed is stored exactly once."""
        report = VerificationReport(db_name=analog_db.DB_NAME)
        present = set(await self.db.list_collection_names())

        report.missing_collections = [
            name for name in analog_db.Collections.BOOTSTRAP if name not in present
        ]
        for name in report.missing_collections:
            report.problems.append(f"collection '{name}' does not exist")

        seed = self.seed_target()
        report.seed_matches = await self.contracts.count_documents(seed.model_dump())
        report.contracts_count = await self.contracts.count_documents({})
        report.events_count = await self.events.count_documents({})

        if report.seed_matches == 0:
            report.problems.append("seed watch target not found in contracts")
        elif report.seed_matches > 1:
            report.problems.append(
                f"seed watch target stored {report.seed_matches} times"
            )

        report.ok = not report.problems
        return report

    async def reset(self) -> list[str]:
        """Drop the bootstrap collections. Returns the names that were dropped."""
        present = set(await self.db.list_collection_names())
        dropped = []
        for name in analog_db.Collections.BOOTSTRAP:
            if name in present:
                await self.db.drop_collection(name)
                dropped.append(name)
        logger.warning(f"Dropped collections {dropped} from {analog_db.DB_NAME}")
        return dropped
