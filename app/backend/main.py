"""
FastAPI backend for the Ship & Port tracker.

Vessels live in an in-memory registry owned by the app (``app.state``);
nothing survives a restart. Note that deleting an unknown ship answers
409 Conflict, not 404.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from app.backend.config import (
    API_TITLE, API_VERSION, API_HOST, API_PORT,
    CORS_ORIGINS, LOG_LEVEL, SEED_DEMO_VESSELS
)
from app.backend.schemas import VesselIn
from shipport.core.errors import ShipPortError
from shipport.core.registry import VesselRegistry
from shipport.core.resolver import NearestPortResolver
from shipport.data.ports import PORTS, get_port
from shipport.seed import generate_demo_vessels

logger = logging.getLogger(__name__)

router = APIRouter()


def configure_logging(level: str = LOG_LEVEL):
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def get_registry(request: Request) -> VesselRegistry:
    return request.app.state.registry


def get_resolver(request: Request) -> NearestPortResolver:
    return request.app.state.resolver


def _http_error(error: ShipPortError) -> HTTPException:
    return HTTPException(status_code=error.status_code, detail=error.message)


# =============================================================================
# ROOT & HEALTH
# =============================================================================

@router.get("/")
async def root():
    return {"message": API_TITLE, "version": API_VERSION}


@router.get("/api/health")
async def health(registry: VesselRegistry = Depends(get_registry)):
    """Health check endpoint."""
    return {"status": "healthy", "ships": len(registry), "ports": len(PORTS)}


# =============================================================================
# SHIPS CRUD
# =============================================================================

@router.post("/api/ships")
async def add_ship(
    ship: VesselIn = Body(...),
    registry: VesselRegistry = Depends(get_registry)
):
    """
    Add a ship. The id in the body is only checked for duplicates; the
    stored ship gets ``number of ships + 1``.
    """
    try:
        added = registry.add(ship.to_vessel())
        return {"message": "Ship added successfully.", "ship": added.to_dict()}
    except ShipPortError as e:
        raise _http_error(e)
    except Exception as e:
        logger.exception("Unexpected error adding ship")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/api/ships")
async def list_ships(registry: VesselRegistry = Depends(get_registry)):
    """List all ships."""
    listing = registry.list_vessels()
    return {
        "message": listing.message,
        "ships": [v.to_dict() for v in listing.vessels]
    }


@router.get("/api/ships/{ship_id}")
async def get_ship(ship_id: int, registry: VesselRegistry = Depends(get_registry)):
    """Get a single ship by id."""
    try:
        return registry.get(ship_id).to_dict()
    except ShipPortError as e:
        raise _http_error(e)


@router.put("/api/ships/{ship_id}")
async def update_ship(
    ship_id: int,
    ship: VesselIn = Body(...),
    registry: VesselRegistry = Depends(get_registry)
):
    """
    Update name, velocity and position of a ship.

    The ship's id never changes; a different id in the body only
    triggers a conflict check.
    """
    try:
        updated = registry.update(ship_id, ship.to_vessel())
        return {"message": "Ship updated successfully.", "ship": updated.to_dict()}
    except ShipPortError as e:
        raise _http_error(e)
    except Exception as e:
        logger.exception("Unexpected error updating ship %s", ship_id)
        raise HTTPException(status_code=500, detail=str(e))


@router.put("/api/ships/{ship_id}/velocity")
async def update_ship_velocity(
    ship_id: int,
    velocity: float = Body(..., description="New velocity (raw JSON number)"),
    registry: VesselRegistry = Depends(get_registry)
):
    """Change only a ship's velocity."""
    try:
        updated = registry.update_velocity(ship_id, velocity)
        return {"message": "Ship velocity updated successfully.", "ship": updated.to_dict()}
    except ShipPortError as e:
        raise _http_error(e)
    except Exception as e:
        logger.exception("Unexpected error updating velocity of ship %s", ship_id)
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/api/ships/{ship_id}")
async def remove_ship(ship_id: int, registry: VesselRegistry = Depends(get_registry)):
    """Remove a ship. Unknown ids answer 409 Conflict."""
    try:
        removed = registry.remove(ship_id)
        return {"message": "Ship removed successfully.", "ship": removed.to_dict()}
    except ShipPortError as e:
        raise _http_error(e)
    except Exception as e:
        logger.exception("Unexpected error removing ship %s", ship_id)
        raise HTTPException(status_code=500, detail=str(e))


# =============================================================================
# PORTS & NEAREST PORT
# =============================================================================

@router.get("/api/ships/{ship_id}/closest-port")
async def get_closest_port(ship_id: int, resolver: NearestPortResolver = Depends(get_resolver)):
    """Nearest port to a ship and the estimated time to reach it."""
    try:
        return resolver.resolve(ship_id).to_dict()
    except ShipPortError as e:
        raise _http_error(e)
    except Exception as e:
        logger.exception("Unexpected error resolving closest port for ship %s", ship_id)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/api/ports")
async def list_ports():
    """Fixed port catalog."""
    return {"ports": [p.to_dict() for p in PORTS]}


@router.get("/api/ports/{port_id}")
async def get_port_by_id(port_id: int):
    port = get_port(port_id)
    if not port:
        raise HTTPException(status_code=404, detail="Port not found")
    return port.to_dict()


def create_app(registry: Optional[VesselRegistry] = None, seed_vessels: int = SEED_DEMO_VESSELS) -> FastAPI:
    """
    Build the API around a registry.

    Args:
        registry: Registry to serve; a fresh one is created when omitted
        seed_vessels: Number of Faker demo vessels to add on creation
    """
    app = FastAPI(
        title=API_TITLE,
        version=API_VERSION,
        description="Vessel registry with nearest-port and arrival-time estimates"
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.registry = registry if registry is not None else VesselRegistry()
    app.state.resolver = NearestPortResolver(app.state.registry)

    if seed_vessels > 0:
        for vessel in generate_demo_vessels(seed_vessels):
            app.state.registry.add(vessel)
        logger.info("Seeded %d demo vessels", seed_vessels)

    app.include_router(router)
    return app


app = create_app()


def run():
    import uvicorn
    configure_logging()
    logger.info("Starting %s on %s:%s", API_TITLE, API_HOST, API_PORT)
    uvicorn.run(app, host=API_HOST, port=API_PORT)


if __name__ == "__main__":
    run()
