from pydantic import Field
from typing import Optional, List, Dict
from datetime import datetime

from knowzone.models.base import Record, utcnow


class BusRoute(Record):
    """College bus route, keyed by a code such as ``BUS01``"""

    id: str
    route: str
    driver_name: str
    driver_contact: Optional[str] = None
    gps_live_link: Optional[str] = None
    timings: Dict[str, str] = Field(default_factory=dict)  # {"start": ..., "end": ...}

    # Passenger membership by external identity
    student_ids: List[str] = Field(default_factory=list)
    faculty_ids: List[str] = Field(default_factory=list)

    is_active: bool = True
    created_at: datetime = Field(default_factory=utcnow)
