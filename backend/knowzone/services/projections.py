"""
Read-time joins.

Attach trimmed user summaries to posts, questions, answers, lost & found
items and bus routes. A reference that no longer resolves becomes ``None``
rather than failing the request, and anonymous posts and questions never
carry their author, whatever the stored link says.
"""
from typing import List, Optional

from knowzone.db.repository import Repository
from knowzone.models import (
    BusRoute,
    ForumPost,
    LostFoundItem,
    Question,
    QuestionAnswer,
    User,
    UserRole,
)
from knowzone.schemas.bus_route import BusRouteWithCoPassengers
from knowzone.schemas.forum import ForumPostWithAuthor
from knowzone.schemas.lost_found import LostFoundWithPoster
from knowzone.schemas.mentor import AnswerWithAnswerer, QuestionWithDetails
from knowzone.schemas.user import LinkedInProfile, UserSummary


def summarize_user(user: Optional[User]) -> Optional[UserSummary]:
    if user is None:
        return None
    return UserSummary(
        name=user.name,
        role=user.role,
        department=user.department,
        profile_image=user.profile_image,
    )


async def with_author(repository: Repository, post: ForumPost) -> ForumPostWithAuthor:
    if post.is_anonymous:
        return ForumPostWithAuthor(**post.model_dump(exclude={"author_id"}))
    author = summarize_user(await repository.get_user(post.author_id))
    return ForumPostWithAuthor(**post.model_dump(), author=author)


async def with_asker(repository: Repository, question: Question) -> QuestionWithDetails:
    answers = await repository.get_answers_by_question(question.id)
    if question.is_anonymous:
        return QuestionWithDetails(
            **question.model_dump(exclude={"asker_uid"}), answer_count=len(answers)
        )
    asker = summarize_user(await repository.get_user_by_firebase_uid(question.asker_uid))
    return QuestionWithDetails(**question.model_dump(), asker=asker, answer_count=len(answers))


async def with_answerer(repository: Repository, answer: QuestionAnswer) -> AnswerWithAnswerer:
    answerer = summarize_user(await repository.get_user_by_firebase_uid(answer.answerer_uid))
    return AnswerWithAnswerer(**answer.model_dump(), answerer=answerer)


async def with_poster(repository: Repository, item: LostFoundItem) -> LostFoundWithPoster:
    poster = summarize_user(await repository.get_user(item.posted_by))
    return LostFoundWithPoster(**item.model_dump(), poster=poster)


async def with_co_passengers(
    repository: Repository,
    route: BusRoute,
    caller: User,
) -> BusRouteWithCoPassengers:
    """The route plus every other resolvable rider, students first"""
    co_passengers: List[UserSummary] = []
    seen = {caller.firebase_uid}
    for uid in route.student_ids + route.faculty_ids:
        if uid in seen:
            continue
        seen.add(uid)
        summary = summarize_user(await repository.get_user_by_firebase_uid(uid))
        if summary is not None:
            co_passengers.append(summary)
    return BusRouteWithCoPassengers(**route.model_dump(), co_passengers=co_passengers)


def to_linkedin_profile(user: User) -> LinkedInProfile:
    return LinkedInProfile(
        id=user.id,
        name=user.name,
        role=user.role,
        department=user.department,
        branch=user.branch,
        year=user.year,
        linkedin_url=user.linkedin_url,
        profile_image=user.profile_image,
        college_id=user.college_id,
    )


async def linkedin_directory(repository: Repository) -> List[LinkedInProfile]:
    """Students who have shared a LinkedIn URL"""
    students = await repository.get_users_by_role(UserRole.STUDENT)
    return [to_linkedin_profile(u) for u in students if u.linkedin_url]


async def join_all(join, repository: Repository, rows) -> List:
    """Apply ``join`` to each row in order"""
    return [await join(repository, row) for row in rows]
