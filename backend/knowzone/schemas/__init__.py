# Pydantic schemas
from knowzone.schemas.auth import (
    StudentSignup,
    AlumniSignup,
    FacultySignup,
    SignupPayload,
    SignupRequest,
    ProfileUpdate,
)
from knowzone.schemas.user import UserSummary, LinkedInProfile
from knowzone.schemas.college import CollegeCreate
from knowzone.schemas.forum import ForumPostCreate, ForumPostWithAuthor
from knowzone.schemas.mentor import (
    QuestionCreate,
    AnswerCreate,
    QuestionWithDetails,
    AnswerWithAnswerer,
)
from knowzone.schemas.opportunity import OpportunityCreate, OpportunityRecommendation
from knowzone.schemas.lost_found import LostFoundCreate, LostFoundWithPoster
from knowzone.schemas.bus_route import BusRouteCreate, BusRouteWithCoPassengers
from knowzone.schemas.chat import ChatRequest, ChatResponse
from knowzone.schemas.notification import NotificationCopy, SuccessResponse
