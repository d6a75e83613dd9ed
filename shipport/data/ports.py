"""
Fixed port catalog.

The order matters: nearest-port resolution keeps the first of equally
distant ports, so iteration must follow this tuple.
"""
from typing import Optional

from shipport.models.port import Port

PORTS = (
    Port(port_id=1, name="Kandla Port", latitude=23.00, longitude=70.18),
    Port(port_id=2, name="Mundra Port", latitude=22.74, longitude=69.70),
    Port(port_id=3, name="Jamnagar Port", latitude=22.47, longitude=70.05),
)


def get_port(port_id: int) -> Optional[Port]:
    """Look up a catalog port by id."""
    for port in PORTS:
        if port.port_id == port_id:
            return port
    return None
