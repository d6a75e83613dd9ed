"""
Request bodies for the ship endpoints.

Fields default to their "unset" values instead of being required so that
the registry's ordered validation decides which error a bad request gets.
"""
from typing import Optional
from pydantic import BaseModel, Field

from shipport.models.vessel import Vessel


class VesselIn(BaseModel):
    id: int = Field(0, description="Client id; only checked for collisions")
    name: Optional[str] = Field(None, description="Vessel name, must not be blank")
    velocity: float = Field(0.0, description="Speed per hour, must be non-zero")
    latitude: float = Field(0.0, description="Latitude in decimal degrees, must be non-zero")
    longitude: float = Field(0.0, description="Longitude in decimal degrees, must be non-zero")

    def to_vessel(self) -> Vessel:
        return Vessel(
            id=self.id,
            name=self.name or "",
            velocity=self.velocity,
            latitude=self.latitude,
            longitude=self.longitude,
        )
