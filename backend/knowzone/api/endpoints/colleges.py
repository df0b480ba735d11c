from fastapi import APIRouter, Depends
from typing import List

from knowzone.core.database import get_repository
from knowzone.core.exceptions import ResourceNotFoundError
from knowzone.core.logging_config import logger
from knowzone.db.repository import Repository
from knowzone.models import College, User
from knowzone.modules.auth.dependencies import get_current_faculty
from knowzone.schemas.college import CollegeCreate

router = APIRouter(prefix="/colleges", tags=["Colleges"])


@router.get("", response_model=List[College])
async def list_colleges(repository: Repository = Depends(get_repository)):
    """Get all colleges. Public endpoint."""
    return await repository.get_all_colleges()


@router.get("/{college_id}", response_model=College)
async def get_college(
    college_id: str,
    repository: Repository = Depends(get_repository)
):
    college = await repository.get_college(college_id)
    if not college:
        raise ResourceNotFoundError("College", college_id)
    return college


@router.post("", response_model=College)
async def create_college(
    payload: CollegeCreate,
    current_user: User = Depends(get_current_faculty),
    repository: Repository = Depends(get_repository)
):
    """Create a college, or replace the one stored under the same id. Faculty only."""
    if await repository.get_college(payload.id):
        logger.info(f"Replacing college {payload.id}")

    college = await repository.create_college(payload)
    logger.info(f"College {college.id} saved by user {current_user.id}")
    return college
