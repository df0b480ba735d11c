from fastapi import APIRouter, Depends
from typing import List, Optional

from knowzone.core.database import get_repository
from knowzone.core.exceptions import ResourceNotFoundError
from knowzone.core.logging_config import logger
from knowzone.db.repository import Repository
from knowzone.models import BusRoute, User
from knowzone.modules.auth.dependencies import get_current_faculty, get_current_user
from knowzone.schemas.bus_route import BusRouteCreate, BusRouteWithCoPassengers
from knowzone.services.projections import with_co_passengers

router = APIRouter(prefix="/bus-routes", tags=["Bus Tracker"])


@router.get("", response_model=List[BusRoute])
async def list_bus_routes(repository: Repository = Depends(get_repository)):
    """Active bus routes. Public endpoint."""
    return await repository.get_all_bus_routes()


@router.get("/my-bus", response_model=Optional[BusRouteWithCoPassengers])
async def get_my_bus(
    current_user: User = Depends(get_current_user),
    repository: Repository = Depends(get_repository)
):
    """
    The caller's bus with everyone else on it.
    ``null`` when the caller has no bus assigned.
    """
    if not current_user.bus_id:
        return None

    route = await repository.get_bus_route(current_user.bus_id)
    if not route:
        raise ResourceNotFoundError("Bus route", current_user.bus_id)

    return await with_co_passengers(repository, route, current_user)


@router.post("", response_model=BusRoute)
async def create_bus_route(
    payload: BusRouteCreate,
    current_user: User = Depends(get_current_faculty),
    repository: Repository = Depends(get_repository)
):
    """Create a route, or replace the one stored under the same code. Faculty only."""
    route = await repository.create_bus_route(payload)
    logger.info(f"Bus route {route.id} saved by user {current_user.id}")
    return route
