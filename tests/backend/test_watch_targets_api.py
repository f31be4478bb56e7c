"""
Tests for the watch targets router.

The client fixture runs the startup bootstrap against mongomock, so every
test starts with the seed watch target stored.
"""

from unittest.mock import patch

from bson import ObjectId
from fastapi.testclient import TestClient

# Seed address with one letter's case flipped, which breaks the EIP-55 checksum
BAD_CHECKSUM_ADDRESS = "0x5FBDB2315678afecb367f032d93F642f64180aa3"


class TestStartupBootstrap:
    """The app lifespan prepares the database."""

    def test_seed_listed_after_startup(self, client, seed_target_data):
        response = client.get("/watch-targets")

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        for field, value in seed_target_data.items():
            assert data[0][field] == value

    def test_bootstrap_status_ok(self, client):
        response = client.get("/bootstrap/status")

        assert response.status_code == 200
        data = response.json()
        assert data["ok"] is True
        assert data["seed_matches"] == 1
        assert data["missing_collections"] == []

    def test_startup_failure_does_not_block_app(self, app):
        """A bootstrap error is logged and the API still serves /health."""
        async def broken():
            raise RuntimeError("no database")

        with patch("analog.main.get_mongo_client", broken):
            with TestClient(app) as c:
                response = c.get("/health")

        assert response.status_code == 200

    def test_startup_without_bootstrap_leaves_database_empty(
        self, app, settings, mock_get_mongo_client
    ):
        """With bootstrap_on_startup off, nothing is created and the status is not OK."""
        no_bootstrap = settings.model_copy(update={"bootstrap_on_startup": False})

        with patch("analog.main.get_settings", lambda: no_bootstrap), \
             patch("analog.main.get_mongo_client", mock_get_mongo_client), \
             patch("analog.routers.watch_targets.get_mongo_client", mock_get_mongo_client):
            with TestClient(app) as c:
                status_data = c.get("/bootstrap/status").json()
                targets = c.get("/watch-targets").json()

        assert status_data["ok"] is False
        assert status_data["seed_matches"] == 0
        assert sorted(status_data["missing_collections"]) == ["contracts", "events"]
        assert targets == []


class TestCreateWatchTarget:
    """Tests for POST /watch-targets."""

    def test_create_returns_201(self, client, other_target_data):
        response = client.post("/watch-targets", json=other_target_data)

        assert response.status_code == 201
        data = response.json()
        assert ObjectId.is_valid(data["id"])
        assert data["contract_address"] == other_target_data["contract_address"]

    def test_create_duplicate_returns_409(self, client, seed_target_data):
        response = client.post("/watch-targets", json=seed_target_data)

        assert response.status_code == 409
        assert "already exists" in response.json()["detail"]

    def test_create_invalid_address_returns_422(self, client, other_target_data):
        body = {**other_target_data, "contract_address": "0x1234"}

        response = client.post("/watch-targets", json=body)

        assert response.status_code == 422

    def test_create_bad_checksum_returns_422(self, client, seed_target_data):
        body = {**seed_target_data, "contract_address": BAD_CHECKSUM_ADDRESS}

        response = client.post("/watch-targets", json=body)

        assert response.status_code == 422
        assert "checksum" in response.text
        assert len(client.get("/watch-targets").json()) == 1

    def test_create_lowercase_seed_address_returns_409(self, client, seed_target_data):
        body = {**seed_target_data, "contract_address": seed_target_data["contract_address"].lower()}

        response = client.post("/watch-targets", json=body)

        assert response.status_code == 409

    def test_create_stores_checksum_address(self, client, other_target_data):
        body = {**other_target_data, "contract_address": other_target_data["contract_address"].lower()}

        response = client.post("/watch-targets", json=body)

        assert response.status_code == 201
        assert response.json()["contract_address"] == other_target_data["contract_address"]

    def test_create_normalizes_event_type(self, client, other_target_data):
        body = {**other_target_data, "event_type": "0x" + other_target_data["event_type"].upper()}

        response = client.post("/watch-targets", json=body)

        assert response.status_code == 201
        assert response.json()["event_type"] == other_target_data["event_type"]


class TestReadAndDeleteWatchTarget:
    """Tests for GET/DELETE /watch-targets/{id}."""

    def test_get_by_id(self, client, other_target_data):
        created = client.post("/watch-targets", json=other_target_data).json()

        response = client.get(f"/watch-targets/{created['id']}")

        assert response.status_code == 200
        assert response.json()["chain_endpoint"] == other_target_data["chain_endpoint"]

    def test_get_unknown_returns_404(self, client):
        response = client.get(f"/watch-targets/{ObjectId()}")

        assert response.status_code == 404

    def test_filter_by_contract_address(self, client, other_target_data):
        client.post("/watch-targets", json=other_target_data)

        response = client.get(
            "/watch-targets",
            params={"contract_address": other_target_data["contract_address"]},
        )

        data = response.json()
        assert len(data) == 1
        assert data[0]["contract_address"] == other_target_data["contract_address"]

    def test_delete_then_get_returns_404(self, client, other_target_data):
        created = client.post("/watch-targets", json=other_target_data).json()

        delete_response = client.delete(f"/watch-targets/{created['id']}")
        get_response = client.get(f"/watch-targets/{created['id']}")

        assert delete_response.status_code == 204
        assert get_response.status_code == 404

    def test_delete_unknown_returns_404(self, client):
        response = client.delete(f"/watch-targets/{ObjectId()}")

        assert response.status_code == 404

    def test_delete_malformed_id_returns_400(self, client):
        response = client.delete("/watch-targets/not-an-id")

        assert response.status_code == 400
        assert "Invalid watch target ID" in response.json()["detail"]

    def test_get_malformed_id_returns_400(self, client):
        response = client.get("/watch-targets/not-an-id")

        assert response.status_code == 400

    def test_filter_with_malformed_address_returns_400(self, client):
        response = client.get("/watch-targets", params={"contract_address": "0x1234"})

        assert response.status_code == 400

    def test_deleting_seed_fails_bootstrap_status(self, client):
        seed_id = client.get("/watch-targets").json()[0]["id"]
        client.delete(f"/watch-targets/{seed_id}")

        data = client.get("/bootstrap/status").json()

        assert data["ok"] is False
        assert data["seed_matches"] == 0
