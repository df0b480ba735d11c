"""
Identity token verification.

KnowZone never issues its own sessions: clients sign in with the external
identity provider and send its ID token as ``Authorization: Bearer <token>``.
A ``TokenVerifier`` turns that token into the provider's stable subject id
(the user's ``firebaseUid``).

- ``FirebaseTokenVerifier``: verifies Firebase ID tokens with google-auth.
- ``JWTTokenVerifier``: verifies HS256 tokens signed with ``JWT_SECRET_KEY``
  (local development and tests; tokens minted by ``create_identity_token``).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any

from fastapi import Request
from jose import JWTError, jwt
from google.auth import exceptions as google_exceptions
from google.auth.transport import requests as google_requests
from google.oauth2 import id_token
from starlette.concurrency import run_in_threadpool

from knowzone.core.config import Settings, settings
from knowzone.core.exceptions import InvalidTokenError
from knowzone.core.logging_config import logger


@dataclass
class VerifiedIdentity:
    """Result of a successful token verification"""
    uid: str
    email: Optional[str] = None
    claims: Dict[str, Any] = field(default_factory=dict)


class TokenVerifier(ABC):
    """Verifies a bearer token issued by the external identity provider"""

    @abstractmethod
    async def verify(self, token: str) -> VerifiedIdentity:
        """Return the verified identity or raise ``InvalidTokenError``"""


class FirebaseTokenVerifier(TokenVerifier):
    """Verify Firebase ID tokens against Google's public certificates."""

    def __init__(self, project_id: str):
        self.project_id = project_id
        self._request = google_requests.Request()

    async def verify(self, token: str) -> VerifiedIdentity:
        try:
            # google-auth fetches certificates with blocking I/O
            claims = await run_in_threadpool(
                id_token.verify_firebase_token,
                token,
                self._request,
                audience=self.project_id,
            )
        except (ValueError, google_exceptions.GoogleAuthError) as e:
            raise InvalidTokenError(str(e))

        if not claims or not claims.get("sub"):
            raise InvalidTokenError("Token has no subject")

        return VerifiedIdentity(uid=claims["sub"], email=claims.get("email"), claims=claims)


class JWTTokenVerifier(TokenVerifier):
    """Verify identity tokens signed with a shared secret."""

    def __init__(self, secret_key: str, algorithm: str = "HS256", audience: str = ""):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.audience = audience

    async def verify(self, token: str) -> VerifiedIdentity:
        try:
            claims = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                audience=self.audience or None,
                options={"verify_aud": bool(self.audience)},
            )
        except JWTError as e:
            raise InvalidTokenError(str(e))

        uid = claims.get("uid") or claims.get("sub")
        if not uid:
            raise InvalidTokenError("Token has no subject")

        return VerifiedIdentity(uid=uid, email=claims.get("email"), claims=claims)


def create_identity_token(
    uid: str,
    email: Optional[str] = None,
    expires_delta: Optional[timedelta] = None,
    config: Settings = settings,
) -> str:
    """Mint an identity token accepted by ``JWTTokenVerifier``"""
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=config.IDENTITY_TOKEN_EXPIRE_MINUTES))

    to_encode: Dict[str, Any] = {"sub": uid, "iat": now, "exp": expire}
    if email:
        to_encode["email"] = email
    if config.JWT_AUDIENCE:
        to_encode["aud"] = config.JWT_AUDIENCE

    return jwt.encode(to_encode, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def build_token_verifier(config: Settings = settings) -> TokenVerifier:
    """Create the verifier selected by ``AUTH_PROVIDER``"""
    provider = config.AUTH_PROVIDER.lower()

    if provider == "firebase":
        logger.info(f"Token verification: Firebase (project={config.FIREBASE_PROJECT_ID})")
        return FirebaseTokenVerifier(config.FIREBASE_PROJECT_ID)

    if provider == "jwt":
        logger.info(f"Token verification: shared-secret JWT ({config.JWT_ALGORITHM})")
        return JWTTokenVerifier(config.JWT_SECRET_KEY, config.JWT_ALGORITHM, config.JWT_AUDIENCE)

    raise ValueError(f"Unknown AUTH_PROVIDER: {config.AUTH_PROVIDER}")


def get_token_verifier(request: Request) -> TokenVerifier:
    """FastAPI dependency: the verifier created at startup"""
    return request.app.state.token_verifier
