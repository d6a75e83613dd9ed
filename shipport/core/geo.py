"""
Great-circle distance and arrival-time helpers.
"""
import math
from datetime import timedelta

from shipport.config import EARTH_RADIUS_KM


def calculate_distance_km(
    lat1: float, lon1: float,
    lat2: float, lon2: float
) -> float:
    """
    Calculate the great circle distance between two points using the
    haversine formula.

    Args:
        lat1: Latitude of first point in decimal degrees
        lon1: Longitude of first point in decimal degrees
        lat2: Latitude of second point in decimal degrees
        lon2: Longitude of second point in decimal degrees

    Returns:
        Distance in kilometers
    """
    lat1_r, lat2_r = math.radians(lat1), math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    a = math.sin(dlat / 2) ** 2 + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlon / 2) ** 2
    # Float rounding can push a slightly past 1 near antipodal points
    a = min(max(a, 0.0), 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def estimate_arrival_time(velocity: float, distance: float) -> timedelta:
    """
    Estimate travel time as distance / velocity hours.

    The caller guarantees velocity != 0 (the registry rejects zero
    velocities); a zero velocity raises ZeroDivisionError. Velocities so
    small that the duration exceeds timedelta.max raise OverflowError.
    """
    return timedelta(hours=distance / velocity)
