"""
Global test fixtures for analog.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Settings isolated from the local .env
- Seed and sample watch-target documents
- FastAPI test clients wired to the mock database
"""

import sys
from pathlib import Path
from typing import Generator
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


SEED_CHAIN_ENDPOINT = "ws://127.0.0.1:8545/"
SEED_CONTRACT_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
SEED_EVENT_TYPE = "ddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def settings():
    """Settings built from defaults only, ignoring any .env file."""
    from analog.config import Settings
    return Settings(_env_file=None)


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    This provides an in-memory MongoDB that behaves like motor
    for testing purposes.
    """
    try:
        from mongomock_motor import AsyncMongoMockClient
        client = AsyncMongoMockClient()
        yield client
        client.close()
    except ImportError:
        pytest.skip("mongomock-motor not installed")


@pytest.fixture
def mock_analog_db(mock_async_mongo_client):
    """Provide mock analog_db database."""
    yield mock_async_mongo_client["analog_db"]


@pytest.fixture
def mock_get_mongo_client(mock_async_mongo_client):
    """
    Replacement for analog.database.connections.get_mongo_client.

    Usage in tests:
        with patch("analog.cli.get_mongo_client", mock_get_mongo_client):
            ...
    """
    async def _mock():
        return mock_async_mongo_client
    return _mock


# =============================================================================
# Watch Target Fixtures
# =============================================================================

@pytest.fixture
def seed_target_data() -> dict:
    """The watch target the bootstrap inserts."""
    return {
        "chain_endpoint": SEED_CHAIN_ENDPOINT,
        "contract_address": SEED_CONTRACT_ADDRESS,
        "event_type": SEED_EVENT_TYPE,
    }


@pytest.fixture
def other_target_data() -> dict:
    """A second, distinct watch target (Approval topic on another node)."""
    return {
        "chain_endpoint": "wss://node.example.org/ws",
        "contract_address": "0xe7f1725E7734CE288F8367e1Bb143E90bb3F0512",
        "event_type": "8c5be1e5ebec7d5bd14f71427d1e84f3dd0314c0f7b2291e5b200ac8c7c3b925",
    }


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app():
    """
    Create FastAPI app for testing.

    Note: This imports the actual app and should be used with mocked
    database connections.
    """
    from analog.main import app
    return app


@pytest.fixture
def client(app, mock_get_mongo_client) -> Generator:
    """
    TestClient whose lifespan and routers use the mock database.

    Entering the client runs the startup bootstrap against mongomock.
    """
    with patch("analog.main.get_mongo_client", mock_get_mongo_client), \
         patch("analog.database.connections.get_mongo_client", mock_get_mongo_client), \
         patch("analog.routers.watch_targets.get_mongo_client", mock_get_mongo_client):
        with TestClient(app) as c:
            yield c
