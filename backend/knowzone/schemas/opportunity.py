from pydantic import Field
from typing import List, Optional
from datetime import datetime

from knowzone.models.base import CamelModel
from knowzone.models.opportunity import OpportunityType


class OpportunityCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=300)
    description: str = Field(..., min_length=1)
    type: OpportunityType
    company: Optional[str] = None
    location: Optional[str] = None
    deadline: Optional[datetime] = None
    requirements: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    is_active: bool = True


class OpportunityRecommendation(CamelModel):
    """One AI-ranked opportunity"""
    title: str
    relevance_score: float = Field(..., ge=0, le=100)
    reasoning: str
