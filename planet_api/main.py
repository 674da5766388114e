"""Planet API: FastAPI app."""
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from planet_api.config import Settings
from planet_api.config import settings as default_settings
from planet_api.routers import health, pages, planets
from planet_api.services.planet_store import PlanetStore, StoreUnavailableError

logging.basicConfig(level=default_settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the store if serve() has not already; close it on shutdown."""
    store: PlanetStore = app.state.store
    if not store.connected:
        try:
            await store.connect()
        except StoreUnavailableError:
            logger.exception("MongoDB connection error")
            raise
    logger.info("Planet API started (env: %s)", app.state.settings.app_env)
    yield
    store.close()
    logger.info("Planet API stopped")


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[PlanetStore] = None,
) -> FastAPI:
    """Build the app around the given settings and store (defaults: environment, MongoDB)."""
    settings = settings or default_settings
    app = FastAPI(
        title="Planet API",
        description="Solar system planet lookup",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store or PlanetStore(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, planets.lookup_validation_error)

    app.include_router(pages.router)
    app.include_router(planets.router)
    app.include_router(health.router)
    return app


async def serve(app: FastAPI) -> bool:
    """Connect to MongoDB, then listen. Returns False without listening if the connection fails."""
    config: Settings = app.state.settings
    try:
        await app.state.store.connect()
    except StoreUnavailableError:
        logger.exception("MongoDB connection error; server not started")
        return False
    server = uvicorn.Server(
        uvicorn.Config(
            app,
            host=config.host,
            port=config.port,
            log_level=config.log_level.lower(),
        )
    )
    logger.info("Server running on %s:%d", config.host, config.port)
    await server.serve()
    return True


app = create_app()

# Entry point for managed function adapters, which wrap the ASGI app themselves.
handler = app


def run(target: Optional[FastAPI] = None) -> None:
    """Console entry point. Does not listen inside a managed function environment."""
    target = target or app
    config: Settings = target.state.settings
    if config.in_function_environment:
        logger.info("Managed function environment detected; not starting a listener")
        return
    asyncio.run(serve(target))


if __name__ == "__main__":
    run()
