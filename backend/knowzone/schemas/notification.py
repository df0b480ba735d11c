from knowzone.models.base import CamelModel


class NotificationCopy(CamelModel):
    """AI-written notification title and body"""
    title: str
    body: str


class SuccessResponse(CamelModel):
    success: bool = True
