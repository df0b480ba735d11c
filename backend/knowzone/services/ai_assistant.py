"""
KnowZone AI assistant: chat answers, opportunity ranking and notification copy.

Every function takes the ``TextGenerator`` to use, so routes and tests pick
the implementation. Chat raises ``AIServiceError`` and lets the route
substitute its apology; recommendations and notification copy are
best-effort and never raise.
"""
import json
from typing import Any, Dict, List, Optional

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from knowzone.core.exceptions import AIServiceError
from knowzone.core.logging_config import logger
from knowzone.models import Opportunity, User
from knowzone.schemas.notification import NotificationCopy
from knowzone.schemas.opportunity import OpportunityRecommendation
from knowzone.services.text_generator import TextGenerator


FALLBACK_CHAT_RESPONSE = (
    "I apologize, but I couldn't generate a response at this time. Please try again later."
)
FALLBACK_NOTIFICATION = NotificationCopy(
    title="New Update",
    body="Check out what's happening in KnowZone!",
)
MAX_RECOMMENDATIONS = 3

CHAT_SYSTEM_PROMPT = (
    "You are KnowZone, an assistant for college students, alumni and faculty. "
    "Answer academic, career and campus questions clearly and accurately."
)

RECOMMENDATION_SCHEMA: Dict[str, Any] = {
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            "title": {"type": "string"},
            "relevanceScore": {"type": "number", "minimum": 0, "maximum": 100},
            "reasoning": {"type": "string"},
        },
        "required": ["title", "relevanceScore", "reasoning"],
    },
}

NOTIFICATION_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "title": {"type": "string"},
        "body": {"type": "string"},
    },
    "required": ["title", "body"],
}

_recommendations_adapter = TypeAdapter(List[OpportunityRecommendation])


def build_chat_prompt(message: str, context: Optional[str] = None) -> str:
    if context:
        return (
            f"Context: {context}\n\n"
            f"User Question: {message}\n\n"
            "Please provide a helpful and accurate response for this student/educational query."
        )
    return f"Please provide a helpful and accurate response to this student/educational query: {message}"


def build_recommendation_prompt(user: User, opportunities: List[Opportunity]) -> str:
    profile = (
        "User Profile:\n"
        f"Role: {user.role.value}\n"
        f"Department: {user.department}\n"
        f"Branch: {user.branch}\n"
        f"Year: {user.year or 'N/A'}\n"
        f"Interests: {', '.join(user.subjects) if user.subjects else 'General'}"
    )
    listing = "\n".join(f"{o.title} - {o.type.value} - {o.description}" for o in opportunities)

    return (
        f"{profile}\n\n"
        f"Available Opportunities:\n{listing}\n\n"
        f"Please analyze and recommend the top {MAX_RECOMMENDATIONS} most relevant "
        "opportunities for this user. Respond in JSON format:\n"
        '[{"title": "opportunity title", "relevanceScore": 0-100, "reasoning": "why this is relevant"}]'
    )


def build_notification_prompt(user: User, event_type: str, event_data: Dict[str, Any]) -> str:
    return (
        f"Generate a personalized notification for a {user.role.value} in {user.department}.\n\n"
        f"Event Type: {event_type}\n"
        f"Event Data: {json.dumps(event_data, default=str)}\n\n"
        "Create a concise, engaging notification title and body that would be relevant "
        "to this user. Respond in JSON format:\n"
        '{"title": "notification title", "body": "notification body"}'
    )


async def get_ai_response(
    generator: TextGenerator,
    message: str,
    context: Optional[str] = None,
) -> str:
    """Answer a chat message. Raises ``AIServiceError`` on any failure."""
    prompt = build_chat_prompt(message, context)
    try:
        return await generator.generate_text(prompt, system_prompt=CHAT_SYSTEM_PROMPT)
    except AIServiceError:
        raise
    except Exception as e:
        raise AIServiceError(f"Failed to get AI response: {type(e).__name__}: {e}") from e


async def get_opportunity_recommendations(
    generator: TextGenerator,
    user: User,
    opportunities: List[Opportunity],
) -> List[OpportunityRecommendation]:
    """Rank opportunities for ``user``; ``[]`` if the model is unavailable or off-schema"""
    if not opportunities:
        return []

    prompt = build_recommendation_prompt(user, opportunities)
    try:
        raw = await generator.generate_json(prompt, RECOMMENDATION_SCHEMA)
        if raw is None:
            return []
        recommendations = _recommendations_adapter.validate_python(raw)
    except (AIServiceError, PydanticValidationError) as e:
        logger.warning(f"Opportunity recommendations unavailable: {e}")
        return []

    recommendations.sort(key=lambda r: r.relevance_score, reverse=True)
    logger.log_ai_event("recommendations", "ranked", count=len(recommendations))
    return recommendations[:MAX_RECOMMENDATIONS]


async def generate_smart_notification(
    generator: TextGenerator,
    user: User,
    event_type: str,
    event_data: Dict[str, Any],
) -> NotificationCopy:
    """Notification title/body for an event, or the generic copy on failure"""
    prompt = build_notification_prompt(user, event_type, event_data)
    try:
        raw = await generator.generate_json(prompt, NOTIFICATION_SCHEMA)
        if raw is None:
            return FALLBACK_NOTIFICATION
        return NotificationCopy.model_validate(raw)
    except (AIServiceError, PydanticValidationError) as e:
        logger.warning(f"Smart notification copy unavailable: {e}")
        return FALLBACK_NOTIFICATION
