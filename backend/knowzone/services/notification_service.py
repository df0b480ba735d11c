"""
System-event notifications.

No route creates notifications; other parts of the system call
``notify_user`` when something happens that a user should hear about.
"""
from typing import Any, Dict, Optional

from knowzone.core.logging_config import logger
from knowzone.db.repository import Repository
from knowzone.models import Notification, NotificationType, User
from knowzone.services.ai_assistant import generate_smart_notification
from knowzone.services.text_generator import TextGenerator


async def notify_user(
    repository: Repository,
    generator: TextGenerator,
    user: User,
    event_type: NotificationType,
    data: Optional[Dict[str, Any]] = None,
) -> Notification:
    """Store a notification for ``user`` with AI-written copy"""
    data = data or {}
    copy = await generate_smart_notification(generator, user, event_type.value, data)

    notification = await repository.create_notification({
        "user_id": user.id,
        "title": copy.title,
        "body": copy.body,
        "type": event_type,
        "data": data,
    })
    logger.info(f"Notification {notification.id} created for user {user.id} ({event_type.value})")
    return notification
