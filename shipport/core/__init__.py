"""Core registry and resolution modules."""
from .errors import ShipPortError, InvalidInputError, ConflictError, NotFoundError
from .registry import VesselRegistry, VesselListing
from .resolver import NearestPortResolver, ClosestPort

__all__ = [
    "ShipPortError", "InvalidInputError", "ConflictError", "NotFoundError",
    "VesselRegistry", "VesselListing",
    "NearestPortResolver", "ClosestPort",
]
