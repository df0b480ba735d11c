# Re-export all models for convenient imports
from knowzone.models.base import CamelModel, Record, utcnow
from knowzone.models.user import User, UserRole
from knowzone.models.college import College, CollegeType
from knowzone.models.forum import ForumPost
from knowzone.models.mentor import Question, QuestionAnswer, QuestionTarget
from knowzone.models.opportunity import Opportunity, OpportunityType
from knowzone.models.lost_found import LostFoundItem, LostFoundType
from knowzone.models.bus_route import BusRoute
from knowzone.models.chat import ChatMessage
from knowzone.models.notification import Notification, NotificationType

__all__ = [
    "CamelModel",
    "Record",
    "utcnow",
    # User
    "User",
    "UserRole",
    # College
    "College",
    "CollegeType",
    # Community modules
    "ForumPost",
    "Question",
    "QuestionAnswer",
    "QuestionTarget",
    "Opportunity",
    "OpportunityType",
    "LostFoundItem",
    "LostFoundType",
    "BusRoute",
    # Chat & notifications
    "ChatMessage",
    "Notification",
    "NotificationType",
]
