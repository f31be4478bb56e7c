"""
Bootstrap and verification report schemas.
"""
from datetime import datetime

from pydantic import BaseModel, Field


class CollectionReport(BaseModel):
    """Outcome of ensuring the bootstrap collections exist."""
    created: list[str] = Field(default=[], description="Collections created by this run")
    existing: list[str] = Field(default=[], description="Collections that were already present")


class BootstrapReport(BaseModel):
    """Summary of one bootstrap run."""
    db_name: str
    collections: CollectionReport
    indexes: list[str] = Field(default=[], description="Index names ensured on analog_db")
    registered_databases: list[str] = Field(default=[], description="Databases upserted in the registry")
    seed_inserted: bool = Field(False, description="True if the seed watch target was inserted")
    seed_skipped: bool = Field(False, description="True if seeding was disabled for this run")
    finished_at: datetime


class VerificationReport(BaseModel):
    """
    Result of checking the post-bootstrap state.

    ok is True when both collections exist and contracts holds exactly one
    document matching the seed watch target.
    """
    db_name: str
    missing_collections: list[str] = Field(default=[])
    seed_matches: int = Field(0, description="Documents in contracts equal to the seed")
    contracts_count: int = 0
    events_count: int = 0
    ok: bool = False
    problems: list[str] = Field(default=[])
