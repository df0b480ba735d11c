from pydantic import Field
from typing import List, Optional

from knowzone.models.base import CamelModel
from knowzone.models.forum import ForumPost
from knowzone.schemas.user import UserSummary


class ForumPostCreate(CamelModel):
    forum_name: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=300)
    body: str = Field(..., min_length=1)
    tags: List[str] = Field(default_factory=list)
    is_anonymous: bool = False


class ForumPostWithAuthor(ForumPost):
    """Forum post with its author; anonymous posts carry neither ``author`` nor ``authorId``"""
    author_id: Optional[int] = None
    author: Optional[UserSummary] = None
