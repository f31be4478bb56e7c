"""
Watch target service for managing analog_db.contracts documents.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import ValidationError
from pymongo.errors import DuplicateKeyError

from analog.core.validators import validate_contract_address
from analog.database.databases import analog_db
from analog.models.watch_target import WatchTarget
from analog.schemas.watch_target import WatchTargetCreate, WatchTargetResponse

logger = logging.getLogger(__name__)


def _object_id(target_id: str) -> ObjectId:
    try:
        return ObjectId(target_id)
    except (InvalidId, TypeError):
        raise ValueError(f"Invalid watch target ID: {target_id}")


class WatchTargetService:
    """Service for watch target operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with analog database."""
        self.db = db
        self.contracts = db[analog_db.Collections.CONTRACTS]

    async def list_targets(
        self, contract_address: Optional[str] = None, limit: int = 100
    ) -> list[WatchTargetResponse]:
        """
        List watch targets, optionally for one contract address.

        Documents that no longer validate are logged and left out.

        Raises:
            ValueError: If contract_address is not a valid address
        """
        query = {}
        if contract_address:
            query["contract_address"] = validate_contract_address(contract_address)

        cursor = self.contracts.find(query, sort=[("_id", 1)])
        docs = await cursor.to_list(length=limit)

        targets = []
        for doc in docs:
            target = self._to_response(doc)
            if target is not None:
                targets.append(target)
        return targets

    async def get_target(self, target_id: str) -> Optional[WatchTargetResponse]:
        """
        Get a watch target by ID.

        Raises:
            ValueError: If target_id is not a valid ObjectId
        """
        doc = await self.contracts.find_one({"_id": _object_id(target_id)})
        if not doc:
            return None
        return self._to_response(doc)

    async def create_target(self, request: WatchTargetCreate) -> WatchTargetResponse:
        """
        Create a new watch target.

        Raises:
            ValueError: If an identical target already exists
        """
        key = request.model_dump()
        if await self.contracts.find_one(key):
            raise ValueError("Watch target already exists")

        now = datetime.now(timezone.utc)
        doc = {**key, "created_at": now, "updated_at": now}
        try:
            result = await self.contracts.insert_one(doc)
        except DuplicateKeyError:
            raise ValueError("Watch target already exists")

        doc["_id"] = result.inserted_id
        return self._to_response(doc)

    async def delete_target(self, target_id: str) -> bool:
        """
        Delete a watch target. Returns False when nothing matched.

        Raises:
            ValueError: If target_id is not a valid ObjectId
        """
        result = await self.contracts.delete_one({"_id": _object_id(target_id)})
        return result.deleted_count > 0

    async def count(self) -> int:
        return await self.contracts.count_documents({})

    @staticmethod
    def _to_response(doc: dict) -> Optional[WatchTargetResponse]:
        try:
            target = WatchTarget.model_validate(doc)
        except ValidationError as e:
            logger.warning(
                f"Skipping invalid watch target {doc.get('_id')}: "
                f"{e.error_count()} validation error(s)"
            )
            return None
        return WatchTargetResponse(
            id=target.id,
            chain_endpoint=target.chain_endpoint,
            contract_address=target.contract_address,
            event_type=target.event_type,
            created_at=target.created_at,
            updated_at=target.updated_at,
        )
