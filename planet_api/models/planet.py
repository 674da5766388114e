"""Planet record and lookup payload."""
from typing import Optional

from pydantic import BaseModel


class Planet(BaseModel):
    name: str
    id: int
    description: str
    image: str
    velocity: str
    distance: str


class PlanetLookup(BaseModel):
    id: Optional[int] = None
