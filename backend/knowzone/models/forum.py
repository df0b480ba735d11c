from pydantic import Field
from typing import List
from datetime import datetime

from knowzone.models.base import Record, utcnow


class ForumPost(Record):
    """Post in a named forum"""

    id: int
    forum_name: str
    title: str
    body: str
    author_id: int
    tags: List[str] = Field(default_factory=list)

    # Counters
    likes: int = 0
    replies: int = 0

    # The author link is kept; anonymity is applied when posts are read
    is_anonymous: bool = False

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
