from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from knowzone.core.database import get_repository
from knowzone.core.exceptions import AuthorizationError, ResourceNotFoundError
from knowzone.core.logging_config import logger
from knowzone.db.repository import Repository
from knowzone.models import LostFoundItem, LostFoundType, User
from knowzone.modules.auth.dependencies import get_current_user
from knowzone.schemas.lost_found import LostFoundCreate, LostFoundWithPoster
from knowzone.services.projections import join_all, with_poster

router = APIRouter(prefix="/lost-found", tags=["Lost & Found"])


@router.get("", response_model=List[LostFoundWithPoster])
async def list_lost_found(
    type: Optional[LostFoundType] = Query(None),
    repository: Repository = Depends(get_repository)
):
    """Unresolved items with their poster"""
    if type:
        items = await repository.get_lost_found_by_type(type)
    else:
        items = await repository.get_all_lost_found_items()
    return await join_all(with_poster, repository, items)


@router.post("", response_model=LostFoundItem)
async def report_item(
    payload: LostFoundCreate,
    current_user: User = Depends(get_current_user),
    repository: Repository = Depends(get_repository)
):
    item = await repository.create_lost_found_item({
        **payload.model_dump(),
        "posted_by": current_user.id,
    })
    logger.info(f"Lost & found item {item.id} ({item.type.value}) reported by user {current_user.id}")
    return item


@router.put("/{item_id}/resolve", response_model=LostFoundItem)
async def resolve_item(
    item_id: int,
    current_user: User = Depends(get_current_user),
    repository: Repository = Depends(get_repository)
):
    """Mark an item resolved, hiding it from every list. Poster only."""
    item = await repository.get_lost_found_item(item_id)
    if not item:
        raise ResourceNotFoundError("Item", item_id)

    if item.posted_by != current_user.id:
        raise AuthorizationError("Only the poster can resolve this item")

    return await repository.update_lost_found_item(item_id, {"is_resolved": True})
