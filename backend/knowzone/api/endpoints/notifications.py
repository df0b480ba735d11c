from fastapi import APIRouter, Depends
from typing import List

from knowzone.core.database import get_repository
from knowzone.core.exceptions import ResourceNotFoundError
from knowzone.db.repository import Repository
from knowzone.models import Notification, User
from knowzone.modules.auth.dependencies import get_current_user
from knowzone.schemas.notification import SuccessResponse

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("", response_model=List[Notification])
async def list_notifications(
    current_user: User = Depends(get_current_user),
    repository: Repository = Depends(get_repository)
):
    return await repository.get_notifications_by_user(current_user.id)


@router.put("/{notification_id}/read", response_model=SuccessResponse)
async def mark_notification_read(
    notification_id: int,
    current_user: User = Depends(get_current_user),
    repository: Repository = Depends(get_repository)
):
    """Mark one of the caller's notifications as read"""
    notifications = await repository.get_notifications_by_user(current_user.id)
    if not any(n.id == notification_id for n in notifications):
        raise ResourceNotFoundError("Notification", notification_id)

    await repository.mark_notification_as_read(notification_id)
    return SuccessResponse()
