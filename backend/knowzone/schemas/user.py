from typing import Optional

from knowzone.models.base import CamelModel
from knowzone.models.user import UserRole


class UserSummary(CamelModel):
    """Trimmed user view embedded in joined responses"""
    name: str
    role: UserRole
    department: str
    profile_image: Optional[str] = None


class LinkedInProfile(CamelModel):
    """Directory entry for GET /users/linkedin"""
    id: int
    name: str
    role: UserRole
    department: str
    branch: str
    year: Optional[str] = None
    linkedin_url: str
    profile_image: Optional[str] = None
    college_id: str
