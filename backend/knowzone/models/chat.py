from pydantic import Field
from typing import Optional
from datetime import datetime

from knowzone.models.base import Record, utcnow


class ChatMessage(Record):
    """One AI chat turn. Append-only."""

    id: int
    user_id: int
    user_message: str
    ai_response: str
    context: Optional[str] = None
    is_helpful: Optional[bool] = None
    created_at: datetime = Field(default_factory=utcnow)
