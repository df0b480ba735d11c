"""
Signup and profile endpoints.

Sign-in itself happens with the external identity provider; these routes
only create and edit the local profile bound to that identity.
"""
from fastapi import APIRouter, Depends

from knowzone.core.database import get_repository
from knowzone.core.exceptions import AuthorizationError, DuplicateResourceError
from knowzone.core.logging_config import logger
from knowzone.core.security import VerifiedIdentity
from knowzone.db.repository import Repository
from knowzone.models import User
from knowzone.modules.auth.dependencies import get_current_user, get_identity
from knowzone.schemas.auth import ProfileUpdate, SignupRequest

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/signup", response_model=User)
async def signup(
    payload: SignupRequest,
    identity: VerifiedIdentity = Depends(get_identity),
    repository: Repository = Depends(get_repository)
):
    """
    Create the local profile for a verified identity.

    - Requires a valid identity token but no existing profile
    - The body's ``firebaseUid`` must be the token's subject
    - Required fields depend on ``role`` (student, alumni or faculty)
    """
    profile = payload.root

    if profile.firebase_uid != identity.uid:
        logger.log_auth_event("signup", success=False, identity=identity.uid, reason="firebaseUid mismatch")
        raise AuthorizationError("firebaseUid does not match the authenticated identity")

    if await repository.get_user_by_firebase_uid(profile.firebase_uid):
        raise DuplicateResourceError("User already exists", field="firebaseUid")

    if await repository.get_user_by_email(profile.email):
        raise DuplicateResourceError("Email already registered", field="email")

    user = await repository.create_user(profile)
    logger.log_auth_event("signup", success=True, identity=identity.uid, role=user.role.value)
    return user


@router.get("/me", response_model=User)
async def get_me(current_user: User = Depends(get_current_user)):
    """Get current user profile"""
    return current_user


@router.put("/me", response_model=User)
async def update_me(
    updates: ProfileUpdate,
    current_user: User = Depends(get_current_user),
    repository: Repository = Depends(get_repository)
):
    """Edit the caller's profile (only the fields sent are changed)"""
    user = await repository.update_user(current_user.id, updates)
    logger.info(f"Profile updated for user {current_user.id}: {sorted(updates.model_fields_set)}")
    return user
