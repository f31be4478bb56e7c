"""
Database definitions and collection constants.
"""
from analog.database.databases import analog_db, system_db

__all__ = ["analog_db", "system_db"]
