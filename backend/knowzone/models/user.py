from pydantic import Field
from typing import Optional, List
from datetime import datetime
import enum

from knowzone.models.base import Record, utcnow


class UserRole(str, enum.Enum):
    """User roles"""
    STUDENT = "student"
    ALUMNI = "alumni"
    FACULTY = "faculty"


class User(Record):
    """User profile, keyed by an integer id and by the external identity"""

    id: int
    firebase_uid: str
    email: str
    name: str
    role: UserRole
    college_id: str
    department: str
    branch: str

    # Student/Alumni specific fields
    usn: Optional[str] = None
    batch: Optional[str] = None
    year: Optional[str] = None
    status: Optional[str] = None  # "current", "alumni"

    # Faculty specific fields
    employee_id: Optional[str] = None
    designation: Optional[str] = None
    experience: Optional[int] = None
    subjects: Optional[List[str]] = None

    # Common optional fields
    linkedin_url: Optional[str] = None
    profile_image: Optional[str] = None
    bus_id: Optional[str] = None

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def __repr__(self):
        return f"<User {self.email}>"
