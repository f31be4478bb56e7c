"""
API routers.
"""
from analog.routers import health, watch_targets

__all__ = ["health", "watch_targets"]
