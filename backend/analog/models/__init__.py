"""
Pydantic models for database documents.
"""
from analog.models.watch_target import WatchTarget

__all__ = [
    "WatchTarget",
]
