from pydantic_settings import BaseSettings
from typing import List, Any
import json


def parse_cors_origins(v: Any) -> List[str]:
    """Parse CORS origins from string or list"""
    if isinstance(v, list):
        return v
    if isinstance(v, str):
        # Try JSON parsing first
        if v.startswith('['):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                pass
        # Fall back to comma-separated
        return [origin.strip() for origin in v.split(',') if origin.strip()]
    return []


class Settings(BaseSettings):
    """Application settings - all configurable via environment variables"""

    # ==========================================
    # Application
    # ==========================================
    APP_NAME: str = "KnowZone"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    API_PREFIX: str = "/api"

    # Server Configuration
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 5000

    # Load sample colleges and bus routes into the repository at startup
    SEED_SAMPLE_DATA: bool = True

    # ==========================================
    # Authentication (external identity provider)
    # ==========================================
    AUTH_PROVIDER: str = "firebase"  # "firebase" or "jwt"
    FIREBASE_PROJECT_ID: str = ""

    # Used when AUTH_PROVIDER=jwt (local development, tests)
    JWT_SECRET_KEY: str = ""
    JWT_ALGORITHM: str = "HS256"
    JWT_AUDIENCE: str = ""
    IDENTITY_TOKEN_EXPIRE_MINUTES: int = 60

    # ==========================================
    # AI text generation
    # ==========================================
    AI_PROVIDER: str = "anthropic"  # "anthropic" or "fallback"
    ANTHROPIC_API_KEY: str = ""
    ANTHROPIC_BASE_URL: str = ""  # Empty means use default Anthropic URL
    CLAUDE_CHAT_MODEL: str = "claude-3-5-haiku-20241022"
    CLAUDE_RECOMMENDATION_MODEL: str = "claude-sonnet-4-20250514"
    CLAUDE_MAX_TOKENS: int = 2048
    CLAUDE_TEMPERATURE: float = 0.7
    CLAUDE_REQUEST_TIMEOUT: int = 60
    CLAUDE_CONNECT_TIMEOUT: int = 10

    # ==========================================
    # CORS (stored as comma-separated string, parsed to list)
    # ==========================================
    CORS_ORIGINS_STR: str = "http://localhost:3000,http://localhost:5173"

    @property
    def CORS_ORIGINS(self) -> List[str]:
        return parse_cors_origins(self.CORS_ORIGINS_STR)

    # Request body limit for RequestSizeLimitMiddleware
    MAX_REQUEST_SIZE: int = 1024 * 1024  # 1MB

    # ==========================================
    # Logging
    # ==========================================
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


# Create settings instance
settings = Settings()
