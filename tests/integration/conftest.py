"""
Integration test fixtures.

These tests require a running MongoDB at LIVE_MONGO_URI.
Mark with @pytest.mark.integration to skip in normal test runs.
"""
import os

import pytest
from pymongo import MongoClient
from pymongo.errors import PyMongoError


@pytest.fixture
def live_mongo_uri():
    """MongoDB URI for live tests."""
    return os.getenv("LIVE_MONGO_URI", "mongodb://localhost:27017")


@pytest.fixture
def skip_if_no_mongodb(live_mongo_uri):
    """Skip test if MongoDB is not reachable."""
    client = MongoClient(live_mongo_uri, serverSelectionTimeoutMS=1000)
    try:
        client.admin.command("ping")
    except PyMongoError:
        pytest.skip(f"No MongoDB at {live_mongo_uri}")
    finally:
        client.close()


@pytest.fixture
def live_motor_client(skip_if_no_mongodb, live_mongo_uri):
    """Motor client against the live server."""
    from motor.motor_asyncio import AsyncIOMotorClient

    client = AsyncIOMotorClient(live_mongo_uri, serverSelectionTimeoutMS=2000)
    yield client
    client.close()
