from pydantic import Field
from typing import List

from knowzone.models.base import CamelModel
from knowzone.models.college import CollegeType


class CollegeCreate(CamelModel):
    """Create (or replace) a college under its slug"""
    id: str = Field(..., min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1)
    type: CollegeType
    forums: List[str] = Field(default_factory=list)
