from fastapi import APIRouter, Depends
from typing import List

from knowzone.core.database import get_repository
from knowzone.db.repository import Repository
from knowzone.schemas.user import LinkedInProfile
from knowzone.services.projections import linkedin_directory

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/linkedin", response_model=List[LinkedInProfile])
async def list_linkedin_profiles(repository: Repository = Depends(get_repository)):
    """Directory of students who shared a LinkedIn profile"""
    return await linkedin_directory(repository)
