from pydantic import Field
from typing import List, Optional

from knowzone.models.base import CamelModel
from knowzone.models.lost_found import LostFoundItem, LostFoundType
from knowzone.schemas.user import UserSummary


class LostFoundCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=300)
    description: str = Field(..., min_length=1)
    type: LostFoundType
    category: str = Field(..., min_length=1)
    location: Optional[str] = None
    contact_info: str = Field(..., min_length=1)
    images: List[str] = Field(default_factory=list)


class LostFoundWithPoster(LostFoundItem):
    poster: Optional[UserSummary] = None
