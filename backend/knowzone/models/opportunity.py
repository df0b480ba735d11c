from pydantic import Field
from typing import Optional, List
from datetime import datetime
import enum

from knowzone.models.base import Record, utcnow


class OpportunityType(str, enum.Enum):
    INTERNSHIP = "internship"
    HACKATHON = "hackathon"
    EVENT = "event"
    JOB = "job"


class Opportunity(Record):
    """Internship, hackathon, event or job posting"""

    id: int
    title: str
    description: str
    type: OpportunityType
    company: Optional[str] = None
    location: Optional[str] = None
    deadline: Optional[datetime] = None
    requirements: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    posted_by: Optional[int] = None

    # Inactive postings are hidden from every list
    is_active: bool = True

    created_at: datetime = Field(default_factory=utcnow)
