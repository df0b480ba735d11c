from pydantic import Field
from typing import Dict, List, Optional

from knowzone.models.base import CamelModel
from knowzone.models.bus_route import BusRoute
from knowzone.schemas.user import UserSummary


class BusRouteCreate(CamelModel):
    """Create (or replace) a bus route under its code"""
    id: str = Field(..., min_length=1, max_length=50)
    route: str = Field(..., min_length=1)
    driver_name: str = Field(..., min_length=1)
    driver_contact: Optional[str] = None
    gps_live_link: Optional[str] = None
    timings: Dict[str, str] = Field(default_factory=dict)
    student_ids: List[str] = Field(default_factory=list)
    faculty_ids: List[str] = Field(default_factory=list)
    is_active: bool = True


class BusRouteWithCoPassengers(BusRoute):
    """The caller's route with everyone else riding it"""
    co_passengers: List[UserSummary] = Field(default_factory=list)
