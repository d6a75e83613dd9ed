"""
Port reference model.
"""
from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True)
class Port:
    """A fixed, named geographic reference point."""
    port_id: int
    name: str
    latitude: float
    longitude: float

    def to_dict(self) -> dict:
        return {
            "port_id": self.port_id,
            "name": self.name,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }


class DistanceCandidate(NamedTuple):
    """A port paired with its distance (km) to a vessel."""
    port: Port
    distance_km: float
