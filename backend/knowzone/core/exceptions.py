"""
Custom Exceptions for KnowZone
==============================

Every error carries a message, a machine-readable code and the HTTP status
the API layer renders it with. The exception handlers in ``knowzone.main``
turn them into ``{"error": <message>, "code": ..., "details": ...}``.

Usage:
    from knowzone.core.exceptions import ResourceNotFoundError

    post = await repository.get_forum_post(post_id)
    if not post:
        raise ResourceNotFoundError("Post", post_id)
"""

from typing import Optional, Any, Dict


class KnowZoneError(Exception):
    """Base exception for all KnowZone errors"""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details
        }


# ============================================
# Authentication & Authorization Errors
# ============================================

class AuthenticationError(KnowZoneError):
    """Caller could not be authenticated"""

    status_code = 401

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message, code="AUTH_FAILED")


class MissingTokenError(AuthenticationError):
    """Authorization header absent or not a bearer token"""

    def __init__(self):
        super().__init__("Missing or invalid authorization header")
        self.code = "MISSING_TOKEN"


class InvalidTokenError(AuthenticationError):
    """Identity token failed verification"""

    def __init__(self, reason: Optional[str] = None):
        super().__init__("Invalid token")
        self.code = "INVALID_TOKEN"
        if reason:
            self.details["reason"] = reason


class AuthorizationError(KnowZoneError):
    """Caller is authenticated but not allowed to do this"""

    status_code = 403

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message, code="NOT_AUTHORIZED")


# ============================================
# Resource Errors (404-type)
# ============================================

class ResourceNotFoundError(KnowZoneError):
    """Base class for not found errors"""

    status_code = 404

    def __init__(self, resource_type: str, resource_id: Any):
        super().__init__(
            f"{resource_type} not found",
            code=f"{resource_type.upper().replace(' ', '_')}_NOT_FOUND",
            details={"resource_type": resource_type, "resource_id": str(resource_id)}
        )


class ProfileNotFoundError(ResourceNotFoundError):
    """Verified identity has no local profile yet (signup pending)"""

    def __init__(self, identity: str):
        super().__init__("User", identity)


# ============================================
# Validation Errors (400-type)
# ============================================

class ValidationError(KnowZoneError):
    """Input validation failed"""

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message, code="VALIDATION_ERROR", details=details)


class DuplicateResourceError(ValidationError):
    """A unique key is already taken"""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, field=field)
        self.code = "DUPLICATE_RESOURCE"


# ============================================
# AI Errors
# ============================================

class AIServiceError(KnowZoneError):
    """AI text generation failed"""

    status_code = 502

    def __init__(self, message: str):
        super().__init__(message, code="AI_SERVICE_ERROR")


class AIResponseParseError(AIServiceError):
    """AI reply could not be parsed into the expected shape"""

    def __init__(self, message: str = "Failed to parse AI response"):
        super().__init__(message)
        self.code = "AI_PARSE_ERROR"


def error_response(error: KnowZoneError) -> Dict[str, Any]:
    """Convert exception to API error response body"""
    body: Dict[str, Any] = {"error": error.message, "code": error.code}
    if error.details:
        body["details"] = error.details
    return body
