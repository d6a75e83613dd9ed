"""
Vessel model for ships tracked by the registry.
"""
from dataclasses import dataclass, replace
from typing import Tuple


@dataclass
class Vessel:
    """
    Tracked vessel.

    Zero latitude/longitude/velocity mean "unset" and are rejected by the
    registry, so the defaults here describe an invalid vessel on purpose.
    """
    id: int = 0
    name: str = ""

    # Speed (distance units per hour); sign allowed, zero forbidden
    velocity: float = 0.0

    # Current position
    latitude: float = 0.0
    longitude: float = 0.0

    def set_position(self, lat: float, lon: float):
        """Update vessel position."""
        self.latitude = lat
        self.longitude = lon

    def get_position(self) -> Tuple[float, float]:
        """Get current position."""
        return (self.latitude, self.longitude)

    def copy(self) -> "Vessel":
        return replace(self)

    def to_dict(self) -> dict:
        """Convert to a JSON-compatible dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "velocity": self.velocity,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }
