"""MongoDB planet collection: one motor client per process, exposed as a FastAPI dependency."""
import logging
from typing import Any, Iterable, Optional

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from planet_api.config import Settings
from planet_api.models.planet import Planet

logger = logging.getLogger(__name__)


class StoreUnavailableError(Exception):
    """The document store could not be reached or configured."""


class PlanetStore:
    """Wraps the planets collection. Connect on startup, close on shutdown."""

    def __init__(self, settings: Settings, client: Any = None) -> None:
        self._settings = settings
        self._client = client
        self._collection = None

    @property
    def connected(self) -> bool:
        return self._collection is not None

    def _make_client(self) -> AsyncIOMotorClient:
        kwargs: dict[str, Any] = {
            "serverSelectionTimeoutMS": self._settings.mongo_server_selection_timeout_ms,
        }
        if self._settings.mongo_username:
            kwargs["username"] = self._settings.mongo_username
        if self._settings.mongo_password:
            kwargs["password"] = self._settings.mongo_password
        return AsyncIOMotorClient(self._settings.mongo_uri, **kwargs)

    async def connect(self) -> None:
        """Create the client and ping the server. Raises StoreUnavailableError on failure."""
        if self.connected:
            return
        try:
            if self._client is None:
                self._client = self._make_client()
            await self._client.admin.command("ping")
            db = self._client.get_default_database(self._settings.mongo_database)
            self._collection = db[self._settings.mongo_collection]
        except PyMongoError as e:
            self.close()
            raise StoreUnavailableError(str(e)) from e
        logger.info(
            "MongoDB connected (collection %s.%s)",
            db.name,
            self._settings.mongo_collection,
        )

    @property
    def collection(self):
        if self._collection is None:
            raise RuntimeError("Planet store not connected")
        return self._collection

    async def find_by_id(self, planet_id: Optional[int]) -> Optional[Planet]:
        """Return the first planet whose `id` matches, or None."""
        doc = await self.collection.find_one({"id": planet_id}, {"_id": 0})
        if doc is None:
            return None
        return Planet.model_validate(doc)

    async def clear(self) -> int:
        result = await self.collection.delete_many({})
        return result.deleted_count

    async def insert_many(self, planets: Iterable[dict[str, Any]]) -> int:
        # insert_many writes _id back into the documents it is given
        docs = [dict(p) for p in planets]
        result = await self.collection.insert_many(docs)
        return len(result.inserted_ids)

    def close(self) -> None:
        """Close the client. Safe to call more than once."""
        if self._client is not None:
            self._client.close()
            self._client = None
            self._collection = None
            logger.info("MongoDB connection closed")


def get_store(request: Request) -> PlanetStore:
    """FastAPI dependency: the process-wide store held on app.state."""
    return request.app.state.store
