from pydantic import Field
from typing import Optional, List
from datetime import datetime
import enum

from knowzone.models.base import Record, utcnow


class LostFoundType(str, enum.Enum):
    LOST = "lost"
    FOUND = "found"


class LostFoundItem(Record):
    """Lost or found item report"""

    id: int
    title: str
    description: str
    type: LostFoundType
    category: str
    location: Optional[str] = None
    contact_info: str
    images: List[str] = Field(default_factory=list)
    posted_by: int

    # Resolved items are hidden from every list
    is_resolved: bool = False

    created_at: datetime = Field(default_factory=utcnow)
