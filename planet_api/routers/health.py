"""Operational endpoints: host info, liveness and readiness checks."""
import socket

from fastapi import APIRouter, Depends

from planet_api.config import Settings, get_settings

router = APIRouter(tags=["health"])


@router.get("/os")
async def os_info(settings: Settings = Depends(get_settings)):
    """Hostname and environment label for diagnostics."""
    return {"os": socket.gethostname(), "env": settings.app_env}


@router.get("/live")
async def live():
    return {"status": "live"}


@router.get("/ready")
async def ready():
    # Does not check the store connection.
    return {"status": "ready"}
