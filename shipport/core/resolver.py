"""
Nearest-port resolver - finds the closest catalog port for a vessel and
estimates when it will get there.
"""
import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import List, Optional, Sequence

from shipport.core.errors import InvalidInputError
from shipport.core.geo import calculate_distance_km, estimate_arrival_time
from shipport.core.registry import VesselRegistry
from shipport.data.ports import PORTS
from shipport.models.port import DistanceCandidate, Port
from shipport.models.vessel import Vessel

logger = logging.getLogger(__name__)


@dataclass
class ClosestPort:
    """Result of resolving a vessel's nearest port."""
    port: Port
    distance_km: float
    estimated_arrival: timedelta
    message: str

    @property
    def estimated_arrival_hours(self) -> float:
        return self.estimated_arrival.total_seconds() / 3600

    def to_dict(self) -> dict:
        return {
            "port_id": self.port.port_id,
            "port_name": self.port.name,
            "port_latitude": self.port.latitude,
            "port_longitude": self.port.longitude,
            "distance_km": self.distance_km,
            "estimated_arrival_hours": self.estimated_arrival_hours,
            "estimated_arrival_time": str(self.estimated_arrival),
            "message": self.message,
        }


class NearestPortResolver:
    """
    Resolve the closest port for vessels held in a registry.
    """

    def __init__(self, registry: VesselRegistry, ports: Sequence[Port] = PORTS):
        self.registry = registry
        self.ports = tuple(ports)

    def port_distances(self, vessel: Vessel) -> List[DistanceCandidate]:
        """Distance from the vessel to every port, in catalog order."""
        return [
            DistanceCandidate(
                port=port,
                distance_km=calculate_distance_km(
                    vessel.latitude, vessel.longitude,
                    port.latitude, port.longitude
                )
            )
            for port in self.ports
        ]

    def resolve(self, ship_id: int) -> ClosestPort:
        """
        Find the nearest port to a vessel and its estimated arrival time.

        Ties keep the earlier port in catalog order.

        Raises:
            NotFoundError: no vessel has this id
            InvalidInputError: velocity too small for a representable duration
        """
        vessel = self.registry.get(ship_id)

        closest: Optional[DistanceCandidate] = None
        for candidate in self.port_distances(vessel):
            if closest is None or candidate.distance_km < closest.distance_km:
                closest = candidate

        if closest is None:
            raise ValueError("Port catalog is empty")

        try:
            eta = estimate_arrival_time(vessel.velocity, closest.distance_km)
        except OverflowError:
            raise InvalidInputError(
                f"Velocity {vessel.velocity} is too small to estimate an arrival time."
            )
        logger.debug(
            "Vessel %s closest port %s at %.3f km",
            ship_id, closest.port.name, closest.distance_km
        )

        return ClosestPort(
            port=closest.port,
            distance_km=closest.distance_km,
            estimated_arrival=eta,
            message=f"Your closest port is {closest.port.name}",
        )
