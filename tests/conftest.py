import pytest

from planet_api.config import Settings
from planet_api.seed_data import PLANETS
from planet_api.services.planet_store import PlanetStore

from tests.fakes import FakeCollection, FakeMongoClient


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        static_dir=str(tmp_path),
        app_env="test",
        host="0.0.0.0",
        port=3000,
        mongo_database="test",
        mongo_collection="planets",
        cors_origins="*",
    )


@pytest.fixture
def collection():
    return FakeCollection(PLANETS)


@pytest.fixture
def mongo_client(collection):
    return FakeMongoClient(collection)


@pytest.fixture
def store(settings, mongo_client):
    return PlanetStore(settings, client=mongo_client)
