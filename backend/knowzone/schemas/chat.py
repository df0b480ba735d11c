from pydantic import Field
from typing import Optional

from knowzone.models.base import CamelModel


class ChatRequest(CamelModel):
    message: str = Field(..., min_length=1, max_length=4000)
    context: Optional[str] = None


class ChatResponse(CamelModel):
    response: str
    message_id: int
