"""
Static pages router

Serves the landing page and the OpenAPI description shipped next to the service.
"""

import json
import logging
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse, PlainTextResponse

from planet_api.config import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"])

INDEX_FILE = "index.html"
API_DOCS_FILE = "oas.json"


@router.get("/", include_in_schema=False)
async def index(settings: Settings = Depends(get_settings)) -> FileResponse:
    """Landing page, returned as-is."""
    file_path = Path(settings.static_dir) / INDEX_FILE
    if not file_path.is_file():
        raise HTTPException(status_code=404, detail="File not found")
    return FileResponse(str(file_path), media_type="text/html")


@router.get("/api-docs")
async def api_docs(settings: Settings = Depends(get_settings)):
    """
    Parsed OpenAPI document.

    Returns:
        The JSON content of oas.json, or a plain-text 500 if it cannot be read
    """
    file_path = Path(settings.static_dir) / API_DOCS_FILE
    try:
        return json.loads(file_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        logger.exception("Error reading file %s", file_path)
        return PlainTextResponse("Error reading file", status_code=500)
