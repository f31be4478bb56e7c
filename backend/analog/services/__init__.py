"""
Service layer for business logic.
"""
from analog.services.bootstrap_service import BootstrapService
from analog.services.watch_target_service import WatchTargetService

__all__ = [
    "BootstrapService",
    "WatchTargetService",
]
