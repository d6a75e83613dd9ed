"""
Vessel registry - owns the mutable fleet and enforces identity and field rules.

Id assignment note: with the default "count" policy a new vessel gets
``len(vessels) + 1``, not ``max(id) + 1``. After a deletion this can hand out
an id that is still in use (e.g. add 1, 2, 3, remove 1, add -> 3 again).
This is the documented behaviour and is kept as-is; set
``VESSEL_ID_POLICY=max`` for monotonic ids.
"""
import logging
import threading
from dataclasses import dataclass, field
from typing import List, Optional

from shipport.config import VESSEL_ID_POLICY
from shipport.core.errors import ConflictError, InvalidInputError, NotFoundError
from shipport.models.vessel import Vessel

logger = logging.getLogger(__name__)

ID_POLICIES = ("count", "max")

EMPTY_FLEET_MESSAGE = "No ship available"
FLEET_MESSAGE = "Ship details"


@dataclass
class VesselListing:
    """Snapshot of the fleet with a human-readable summary."""
    vessels: List[Vessel] = field(default_factory=list)
    message: str = EMPTY_FLEET_MESSAGE

    @property
    def is_empty(self) -> bool:
        return not self.vessels


def validate_vessel_fields(vessel: Vessel):
    """
    Check name, velocity, latitude and longitude, in that order.

    Raises:
        InvalidInputError: for the first field that fails
    """
    if vessel.name is None or not vessel.name.strip():
        raise InvalidInputError("Please enter a non-empty name.")

    if vessel.velocity == 0:
        raise InvalidInputError("Please enter a non-zero velocity.")

    if vessel.latitude == 0:
        raise InvalidInputError("Please enter a non-zero value for Latitude.")

    if vessel.longitude == 0:
        raise InvalidInputError("Please enter a non-zero value for Longitude.")


class VesselRegistry:
    """
    In-memory, ordered collection of vessels.

    All operations run under one lock, so a validate-then-mutate sequence
    never interleaves with another write or with a listing. Callers get
    copies; the stored records are never handed out.
    """

    def __init__(self, id_policy: str = VESSEL_ID_POLICY):
        if id_policy not in ID_POLICIES:
            raise ValueError(f"Unknown id policy '{id_policy}'. Must be one of: {ID_POLICIES}")
        self.id_policy = id_policy
        self._vessels: List[Vessel] = []
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._vessels)

    def _find(self, vessel_id: int) -> Optional[Vessel]:
        # First match wins; ids can repeat under the "count" policy
        for vessel in self._vessels:
            if vessel.id == vessel_id:
                return vessel
        return None

    def _exists(self, vessel_id: int) -> bool:
        return self._find(vessel_id) is not None

    def _next_id(self) -> int:
        if self.id_policy == "max":
            return max((v.id for v in self._vessels), default=0) + 1
        return len(self._vessels) + 1

    def add(self, vessel: Vessel) -> Vessel:
        """
        Register a new vessel.

        The caller-supplied id is only used for the duplicate check; the
        stored record gets a registry-assigned id.

        Raises:
            ConflictError: a vessel with the same id already exists
            InvalidInputError: name/velocity/latitude/longitude rejected
        """
        with self._lock:
            if self._exists(vessel.id):
                logger.warning("Rejected add: id %s already exists", vessel.id)
                raise ConflictError("A ship with the same ID already exists.")

            validate_vessel_fields(vessel)

            record = vessel.copy()
            record.id = self._next_id()
            self._vessels.append(record)

            logger.info("Added vessel %s (%s)", record.id, record.name)
            return record.copy()

    def get(self, vessel_id: int) -> Vessel:
        """
        Get a vessel by id.

        Raises:
            NotFoundError: no vessel has this id
        """
        with self._lock:
            vessel = self._find(vessel_id)
            if vessel is None:
                raise NotFoundError("Ship not found.")
            return vessel.copy()

    def update(self, vessel_id: int, vessel: Vessel) -> Vessel:
        """
        Replace name, velocity and position of an existing vessel.

        The stored id never changes, even when ``vessel.id`` differs from
        ``vessel_id``; a differing id is only checked for collisions.

        Raises:
            NotFoundError: no vessel has ``vessel_id``
            ConflictError: ``vessel.id`` belongs to another vessel
            InvalidInputError: name/velocity/latitude/longitude rejected
        """
        with self._lock:
            existing = self._find(vessel_id)
            if existing is None:
                raise NotFoundError("Ship not found.")

            if vessel.id != vessel_id and self._exists(vessel.id):
                logger.warning("Rejected update of %s: id %s already exists", vessel_id, vessel.id)
                raise ConflictError("A ship with the same ID already exists.")

            validate_vessel_fields(vessel)

            existing.name = vessel.name
            existing.velocity = vessel.velocity
            existing.set_position(vessel.latitude, vessel.longitude)

            logger.info("Updated vessel %s", vessel_id)
            return existing.copy()

    def update_velocity(self, vessel_id: int, velocity: float) -> Vessel:
        """
        Change only the velocity of a vessel.

        Raises:
            InvalidInputError: velocity is zero (checked before the lookup)
            NotFoundError: no vessel has this id
        """
        if velocity == 0:
            raise InvalidInputError("Please enter a non-zero velocity.")

        with self._lock:
            existing = self._find(vessel_id)
            if existing is None:
                raise NotFoundError("Ship not found.")

            existing.velocity = velocity
            logger.info("Vessel %s velocity set to %s", vessel_id, velocity)
            return existing.copy()

    def remove(self, vessel_id: int) -> Vessel:
        """
        Remove a vessel.

        Removing an absent vessel is a conflict, not a not-found.

        Raises:
            ConflictError: no vessel has this id
        """
        with self._lock:
            existing = self._find(vessel_id)
            if existing is None:
                logger.warning("Rejected remove: id %s does not exist", vessel_id)
                raise ConflictError("Ship not exists.")

            self._vessels.remove(existing)
            logger.info("Removed vessel %s (%s)", existing.id, existing.name)
            return existing.copy()

    def list_vessels(self) -> VesselListing:
        """All vessels in insertion order, with a summary message."""
        with self._lock:
            vessels = [v.copy() for v in self._vessels]

        message = FLEET_MESSAGE if vessels else EMPTY_FLEET_MESSAGE
        return VesselListing(vessels=vessels, message=message)
