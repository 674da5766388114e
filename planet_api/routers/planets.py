"""Planets router: POST /planet looks up one planet by id."""
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from planet_api.models.planet import Planet, PlanetLookup
from planet_api.services.planet_store import PlanetStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["planets"])

LOOKUP_PATH = "/planet"


def _server_error() -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


@router.post(
    LOOKUP_PATH,
    response_model=Planet,
    responses={404: {"description": "Planet not found"}, 500: {"description": "Lookup failed"}},
)
async def get_planet(req: PlanetLookup, store: PlanetStore = Depends(get_store)):
    """Return the planet whose `id` matches the request body."""
    try:
        planet = await store.find_by_id(req.id)
    except Exception:
        logger.exception("Error fetching planet data for id=%s", req.id)
        return _server_error()
    if planet is None:
        return JSONResponse(status_code=404, content={"message": "Planet not found"})
    return planet


async def lookup_validation_error(request: Request, exc: RequestValidationError):
    """Malformed lookup bodies are query failures: log them, answer with a bare 500."""
    if request.url.path != LOOKUP_PATH:
        return await request_validation_exception_handler(request, exc)
    logger.error("Malformed planet lookup: %s", exc.errors())
    return _server_error()
