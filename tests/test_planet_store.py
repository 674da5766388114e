import asyncio

import pytest
from pymongo.errors import ConfigurationError, ServerSelectionTimeoutError

from planet_api.config import Settings
from planet_api.models.planet import Planet
from planet_api.services.planet_store import PlanetStore, StoreUnavailableError

from tests.fakes import FakeMongoClient


def test_connect_selects_configured_collection(store, mongo_client):
    asyncio.run(store.connect())

    assert store.connected
    assert mongo_client.database.name == "test"
    assert mongo_client.database.requested == ["planets"]


def test_connect_failure_raises_and_closes_client(settings):
    client = FakeMongoClient(ping_error=ServerSelectionTimeoutError("no servers"))
    store = PlanetStore(settings, client=client)

    with pytest.raises(StoreUnavailableError):
        asyncio.run(store.connect())

    assert not store.connected
    assert client.close_count == 1


def test_invalid_uri_is_reported_as_unavailable():
    store = PlanetStore(Settings(_env_file=None, mongo_uri="mongodb://user@name:pw@localhost"))

    with pytest.raises(StoreUnavailableError) as exc_info:
        asyncio.run(store.connect())

    assert isinstance(exc_info.value.__cause__, ConfigurationError)


def test_credentials_are_passed_only_when_set(monkeypatch):
    captured = {}

    class _RecordingClient:
        def __init__(self, uri, **kwargs):
            captured["uri"] = uri
            captured.update(kwargs)

    monkeypatch.setattr(
        "planet_api.services.planet_store.AsyncIOMotorClient", _RecordingClient
    )

    PlanetStore(
        Settings(_env_file=None, mongo_uri="mongodb://db:27017/solar", mongo_username="", mongo_password="")
    )._make_client()
    assert captured == {"uri": "mongodb://db:27017/solar", "serverSelectionTimeoutMS": 5000}

    captured.clear()
    PlanetStore(
        Settings(_env_file=None, mongo_username="astro", mongo_password="s3cret")
    )._make_client()
    assert captured["username"] == "astro"
    assert captured["password"] == "s3cret"


def test_find_by_id_returns_planet_without_mongo_id(store):
    async def _lookup():
        await store.connect()
        return await store.find_by_id(4)

    planet = asyncio.run(_lookup())

    assert isinstance(planet, Planet)
    assert planet.name == "Mars"
    assert planet.velocity == "24.07 km/s"


def test_find_by_id_missing_returns_none(store):
    async def _lookup():
        await store.connect()
        return await store.find_by_id(42)

    assert asyncio.run(_lookup()) is None


def test_find_before_connect_raises(store):
    with pytest.raises(RuntimeError):
        asyncio.run(store.find_by_id(1))


def test_insert_many_does_not_mutate_input(store):
    docs = [{"name": "Pluto", "id": 9, "description": "", "image": "", "velocity": "", "distance": ""}]

    async def _insert():
        await store.connect()
        return await store.insert_many(docs)

    assert asyncio.run(_insert()) == 1
    assert "_id" not in docs[0]


def test_close_is_idempotent(store, mongo_client):
    asyncio.run(store.connect())

    store.close()
    store.close()

    assert mongo_client.close_count == 1
    assert not store.connected


def test_log_level_is_normalised_for_logging():
    assert Settings(_env_file=None, log_level=" debug ").log_level == "DEBUG"
