from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from knowzone.core.database import get_repository
from knowzone.core.logging_config import logger
from knowzone.db.repository import Repository
from knowzone.models import Opportunity, OpportunityType, User
from knowzone.modules.auth.dependencies import get_current_user
from knowzone.schemas.opportunity import OpportunityCreate, OpportunityRecommendation
from knowzone.services.ai_assistant import get_opportunity_recommendations
from knowzone.services.text_generator import TextGenerator, get_text_generator

router = APIRouter(prefix="/opportunities", tags=["Opportunities"])


@router.get("", response_model=List[Opportunity])
async def list_opportunities(
    type: Optional[OpportunityType] = Query(None),
    repository: Repository = Depends(get_repository)
):
    """Active opportunities, optionally of one type"""
    if type:
        return await repository.get_opportunities_by_type(type)
    return await repository.get_all_opportunities()


@router.get("/recommendations", response_model=List[OpportunityRecommendation])
async def recommend_opportunities(
    current_user: User = Depends(get_current_user),
    repository: Repository = Depends(get_repository),
    generator: TextGenerator = Depends(get_text_generator)
):
    """
    AI-ranked opportunities for the caller.
    Best-effort: an empty list when the AI is unavailable.
    """
    opportunities = await repository.get_all_opportunities()
    return await get_opportunity_recommendations(generator, current_user, opportunities)


@router.post("", response_model=Opportunity)
async def create_opportunity(
    payload: OpportunityCreate,
    current_user: User = Depends(get_current_user),
    repository: Repository = Depends(get_repository)
):
    opportunity = await repository.create_opportunity({
        **payload.model_dump(),
        "posted_by": current_user.id,
    })
    logger.info(f"Opportunity {opportunity.id} ({opportunity.type.value}) posted by user {current_user.id}")
    return opportunity
