"""Reference planet data and the loader that resets the planets collection to it."""
import asyncio
import logging
import sys
from typing import Optional

from planet_api.config import Settings, settings
from planet_api.services.planet_store import PlanetStore

logger = logging.getLogger(__name__)

# ============================================================================
# Planets, ordered by distance from the sun
# ============================================================================
PLANETS = [
    {
        "name": "Mercury",
        "id": 1,
        "description": "Closest planet to the sun.",
        "image": "https://example.com/images/mercury.jpg",
        "velocity": "47.87 km/s",
        "distance": "57.9 million km",
    },
    {
        "name": "Venus",
        "id": 2,
        "description": "Second planet from the sun.",
        "image": "https://example.com/images/venus.jpg",
        "velocity": "35.02 km/s",
        "distance": "108.2 million km",
    },
    {
        "name": "Earth",
        "id": 3,
        "description": "Our home planet.",
        "image": "https://example.com/images/earth.jpg",
        "velocity": "29.78 km/s",
        "distance": "149.6 million km",
    },
    {
        "name": "Mars",
        "id": 4,
        "description": "The red planet.",
        "image": "https://example.com/images/mars.jpg",
        "velocity": "24.07 km/s",
        "distance": "227.9 million km",
    },
    {
        "name": "Jupiter",
        "id": 5,
        "description": "The largest planet in our solar system.",
        "image": "https://example.com/images/jupiter.jpg",
        "velocity": "13.07 km/s",
        "distance": "778.5 million km",
    },
    {
        "name": "Saturn",
        "id": 6,
        "description": "Famous for its rings.",
        "image": "https://example.com/images/saturn.jpg",
        "velocity": "9.69 km/s",
        "distance": "1.43 billion km",
    },
    {
        "name": "Uranus",
        "id": 7,
        "description": "An ice giant with a tilted rotation.",
        "image": "https://example.com/images/uranus.jpg",
        "velocity": "6.81 km/s",
        "distance": "2.87 billion km",
    },
    {
        "name": "Neptune",
        "id": 8,
        "description": "The farthest planet from the sun.",
        "image": "https://example.com/images/neptune.jpg",
        "velocity": "5.43 km/s",
        "distance": "4.5 billion km",
    },
]


async def seed_database(store: PlanetStore) -> bool:
    """
    Replace the planets collection with PLANETS.

    Stops at the first failing step. A failure between the delete and the
    insert leaves the collection empty. The connection is always closed.
    """
    try:
        logger.info("Connecting to MongoDB...")
        await store.connect()

        logger.info("Clearing existing data...")
        deleted = await store.clear()
        logger.info("Removed %d documents", deleted)

        logger.info("Inserting planet data...")
        inserted = await store.insert_many(PLANETS)

        logger.info("Database seeded successfully (%d planets)", inserted)
        return True
    except Exception:
        logger.exception("Seeding failed")
        return False
    finally:
        store.close()


def main(config: Optional[Settings] = None) -> int:
    """Run the seed loader once. Returns a process exit code."""
    config = config or settings
    logging.basicConfig(level=config.log_level)
    ok = asyncio.run(seed_database(PlanetStore(config)))
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
