from pydantic import Field
from typing import List, Optional

from knowzone.models.base import CamelModel
from knowzone.models.mentor import Question, QuestionAnswer, QuestionTarget
from knowzone.schemas.user import UserSummary


class QuestionCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=300)
    body: str = Field(..., min_length=1)
    target_role: QuestionTarget
    is_anonymous: bool = False
    tags: List[str] = Field(default_factory=list)


class AnswerCreate(CamelModel):
    answer: str = Field(..., min_length=1)


class QuestionWithDetails(Question):
    """Question with its asker; anonymous questions carry neither ``asker`` nor ``askerUid``"""
    asker_uid: Optional[str] = None
    asker: Optional[UserSummary] = None
    answer_count: int = 0


class AnswerWithAnswerer(QuestionAnswer):
    answerer: Optional[UserSummary] = None
