"""Models package."""
from .port import Port, DistanceCandidate
from .vessel import Vessel

__all__ = ["Port", "DistanceCandidate", "Vessel"]
