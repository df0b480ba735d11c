"""MentorConnect: questions for seniors/faculty and their answers"""
from pydantic import Field
from typing import List
from datetime import datetime
import enum

from knowzone.models.base import Record, utcnow


class QuestionTarget(str, enum.Enum):
    """Who a question is addressed to"""
    SENIOR = "senior"
    FACULTY = "faculty"
    ANY = "any"


class Question(Record):
    id: int
    title: str
    body: str
    asker_uid: str  # external identity, not User.id
    target_role: QuestionTarget
    is_anonymous: bool = False
    is_answered: bool = False
    tags: List[str] = Field(default_factory=list)
    upvotes: int = 0
    created_at: datetime = Field(default_factory=utcnow)


class QuestionAnswer(Record):
    id: int
    question_id: int
    answerer_uid: str  # external identity, not User.id
    answer: str
    upvotes: int = 0
    is_verified: bool = False
    created_at: datetime = Field(default_factory=utcnow)
