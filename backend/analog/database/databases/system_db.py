"""
System database configuration.
Records which analog databases exist and which collections each one holds.
"""

DB_NAME = "system_db"


class Collections:
    """Collection names in system_db."""
    DB_REGISTRY = "db_registry"
    METADATA = "_metadata"


# Manifest for registry
DB_MANIFEST = {
    "db_name": DB_NAME,
    "purpose": "Registry of analog databases and their collections",
    "collections": [Collections.DB_REGISTRY, Collections.METADATA],
    "access_level": "system",
}
