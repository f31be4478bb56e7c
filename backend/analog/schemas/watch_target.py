"""
Watch target request/response schemas.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from analog.core.validators import (
    normalize_event_type,
    validate_chain_endpoint,
    validate_contract_address,
)


class WatchTargetCreate(BaseModel):
    """Create watch target request."""
    chain_endpoint: str = Field(
        ...,
        examples=["ws://127.0.0.1:8545/"],
        description="Node subscription endpoint",
    )
    contract_address: str = Field(
        ...,
        examples=["0x5FbDB2315678afecb367f032d93F642f64180aa3"],
        description="Contract address",
    )
    event_type: str = Field(
        ...,
        examples=["ddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"],
        description="Event signature hash (0x prefix optional)",
    )

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


class WatchTargetResponse(BaseModel):
    """Watch target response."""
    id: str = Field(..., description="Watch target ID")
    chain_endpoint: str = Field(..., description="Node subscription endpoint")
    contract_address: str = Field(..., description="Contract address")
    event_type: str = Field(..., description="Event signature hash")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last write timestamp")
