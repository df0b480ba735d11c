from pydantic import Field
from typing import Any, Dict
from datetime import datetime
import enum

from knowzone.models.base import Record, utcnow


class NotificationType(str, enum.Enum):
    OPPORTUNITY = "opportunity"
    FORUM = "forum"
    MENTOR = "mentor"
    SYSTEM = "system"


class Notification(Record):
    id: int
    user_id: int
    title: str
    body: str
    type: NotificationType
    data: Dict[str, Any] = Field(default_factory=dict)
    is_read: bool = False
    created_at: datetime = Field(default_factory=utcnow)
