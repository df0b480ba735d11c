"""
Ask KnowZone: AI chat.

Each turn is answered by the configured text generator and stored in the
caller's chat log. An AI failure never fails the request: the turn is
stored with a fixed apology instead.
"""
from fastapi import APIRouter, Depends
from typing import List

from knowzone.core.database import get_repository
from knowzone.core.exceptions import AIServiceError
from knowzone.core.logging_config import logger
from knowzone.db.repository import Repository
from knowzone.models import ChatMessage, User
from knowzone.modules.auth.dependencies import get_current_user
from knowzone.schemas.chat import ChatRequest, ChatResponse
from knowzone.services.ai_assistant import FALLBACK_CHAT_RESPONSE, get_ai_response
from knowzone.services.text_generator import TextGenerator, get_text_generator

router = APIRouter(prefix="/chat", tags=["Chat"])


@router.post("", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    current_user: User = Depends(get_current_user),
    repository: Repository = Depends(get_repository),
    generator: TextGenerator = Depends(get_text_generator)
):
    try:
        ai_response = await get_ai_response(generator, request.message, request.context)
    except AIServiceError as e:
        logger.warning(f"Chat answer unavailable for user {current_user.id}: {e.message}")
        ai_response = FALLBACK_CHAT_RESPONSE

    message = await repository.create_chat_message({
        "user_id": current_user.id,
        "user_message": request.message,
        "ai_response": ai_response,
        "context": request.context,
    })

    return ChatResponse(response=ai_response, message_id=message.id)


@router.get("/history", response_model=List[ChatMessage])
async def chat_history(
    current_user: User = Depends(get_current_user),
    repository: Repository = Depends(get_repository)
):
    """The caller's chat turns, oldest first"""
    return await repository.get_chat_messages_by_user(current_user.id)
