from pydantic import Field
from typing import List
from datetime import datetime
import enum

from knowzone.models.base import Record, utcnow


class CollegeType(str, enum.Enum):
    """College affiliation"""
    VTU = "VTU"
    AUTONOMOUS = "Autonomous"
    GOVERNMENT = "Government"
    PRIVATE = "Private"


class College(Record):
    """College, keyed by a slug such as ``vit-vellore``"""

    id: str
    name: str
    city: str
    type: CollegeType

    # Forums are plain names, shared across colleges (e.g. "All India Forum")
    forums: List[str]
    active_users: List[str] = Field(default_factory=list)

    created_at: datetime = Field(default_factory=utcnow)

    def __repr__(self):
        return f"<College {self.name}>"
