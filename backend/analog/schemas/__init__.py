"""
Request, response and report schemas.
"""
from analog.schemas.watch_target import WatchTargetCreate, WatchTargetResponse
from analog.schemas.bootstrap import (
    BootstrapReport,
    CollectionReport,
    VerificationReport,
)

__all__ = [
    "WatchTargetCreate",
    "WatchTargetResponse",
    "BootstrapReport",
    "CollectionReport",
    "VerificationReport",
]
