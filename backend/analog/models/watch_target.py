"""
Watch target model for analog_db.contracts.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from analog.core.validators import (
    normalize_event_type,
    validate_chain_endpoint,
    validate_contract_address,
)


class WatchTarget(BaseModel):
    """
    Watch target document model for MongoDB analog_db.contracts collection.

    One document names a chain endpoint to subscribe to, the contract whose
    logs matter, and the event topic hash to filter on.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    chain_endpoint: str = Field(..., description="Node subscription endpoint (ws/wss/http/https)")
    contract_address: str = Field(..., description="0x-prefixed 20-byte contract address")
    event_type: str = Field(..., description="Event signature hash, 64 lower-case hex digits")
    created_at: Optional[datetime] = Field(None, description="Insertion timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last write timestamp")

    @field_validator("id", mode="before")
    @classmethod
    def stringify_object_id(cls, v):
        return str(v) if v is not None else v

    @field_validator("chain_endpoint")
    @classmethod
    def check_chain_endpoint(cls, v: str) -> str:
        return validate_chain_endpoint(v)

    @field_validator("contract_address")
    @classmethod
    def check_contract_address(cls, v: str) -> str:
        return validate_contract_address(v)

    @field_validator("event_type")
    @classmethod
    def check_event_type(cls, v: str) -> str:
        return normalize_event_type(v)

    def key(self) -> dict:
        """Filter matching this target's unique triple."""
        return {
            "chain_endpoint": self.chain_endpoint,
            "contract_address": self.contract_address,
            "event_type": self.event_type,
        }
