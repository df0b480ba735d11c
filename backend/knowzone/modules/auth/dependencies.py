from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Optional

from knowzone.core.database import get_repository
from knowzone.core.exceptions import AuthorizationError, InvalidTokenError, MissingTokenError, ProfileNotFoundError
from knowzone.core.logging_config import logger, set_user_id
from knowzone.core.security import TokenVerifier, VerifiedIdentity, get_token_verifier
from knowzone.db.repository import Repository
from knowzone.models import User, UserRole

# auto_error=False so a missing header gets our own 401 body
security = HTTPBearer(auto_error=False)


async def get_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    verifier: TokenVerifier = Depends(get_token_verifier),
) -> VerifiedIdentity:
    """Verify the bearer token; the caller may not have a profile yet"""
    if credentials is None or not credentials.credentials:
        logger.log_auth_event("verify", success=False, reason="missing bearer token")
        raise MissingTokenError()

    try:
        identity = await verifier.verify(credentials.credentials)
    except InvalidTokenError as e:
        logger.log_auth_event("verify", success=False, reason=e.details.get("reason"))
        raise

    logger.log_auth_event("verify", success=True, identity=identity.uid)
    return identity


async def get_current_user(
    identity: VerifiedIdentity = Depends(get_identity),
    repository: Repository = Depends(get_repository),
) -> User:
    """Resolve the verified identity to its local profile"""
    user = await repository.get_user_by_firebase_uid(identity.uid)
    if not user:
        raise ProfileNotFoundError(identity.uid)

    set_user_id(str(user.id))
    return user


async def get_current_faculty(
    current_user: User = Depends(get_current_user)
) -> User:
    """Get current faculty user"""
    if current_user.role != UserRole.FACULTY:
        raise AuthorizationError("Faculty access required")
    return current_user
