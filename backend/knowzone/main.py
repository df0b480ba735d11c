from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager

from knowzone.core.config import settings
from knowzone.core.database import init_repository
from knowzone.core.exceptions import KnowZoneError, error_response
from knowzone.core.logging_config import logger
from knowzone.core.middleware import (
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
    RequestSizeLimitMiddleware,
)
from knowzone.core.security import build_token_verifier
from knowzone.api.router import api_router
from knowzone.services.text_generator import build_text_generator


async def validate_critical_config():
    """Validate critical configuration at startup - fail fast if missing"""
    errors = []
    warnings = []

    provider = settings.AUTH_PROVIDER.lower()
    if provider == "firebase" and not settings.FIREBASE_PROJECT_ID:
        errors.append("FIREBASE_PROJECT_ID is not set (AUTH_PROVIDER=firebase)")
    elif provider == "jwt" and not settings.JWT_SECRET_KEY:
        errors.append("JWT_SECRET_KEY is not set (AUTH_PROVIDER=jwt)")
    elif provider not in ("firebase", "jwt"):
        errors.append(f"Unknown AUTH_PROVIDER: {settings.AUTH_PROVIDER}")

    if provider == "jwt" and settings.is_production:
        warnings.append("AUTH_PROVIDER=jwt in production - tokens are not verified by the identity provider")

    if settings.AI_PROVIDER.lower() == "anthropic" and not settings.ANTHROPIC_API_KEY:
        warnings.append("ANTHROPIC_API_KEY not set - chat and recommendations will use fallback responses")

    if errors:
        for err in errors:
            logger.critical(f"[Startup] CRITICAL: {err}")
        raise RuntimeError(f"Missing critical configuration: {', '.join(errors)}")

    for warn in warnings:
        logger.warning(f"[Startup] WARNING: {warn}")

    logger.info("[Startup] ✓ Critical configuration validated")
    return True


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler for startup and shutdown"""
    logger.info("=" * 60)
    logger.info(f"Starting {settings.APP_NAME}...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info("=" * 60)

    await validate_critical_config()

    app.state.repository = await init_repository(settings.SEED_SAMPLE_DATA)
    app.state.token_verifier = build_token_verifier(settings)
    app.state.text_generator = build_text_generator(settings)

    yield

    logger.info(f"Shutting down {settings.APP_NAME}...")


# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="College community platform: forums, mentoring, opportunities, lost & found, bus tracking and AI chat",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# Add middleware (order matters - last added runs first)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestSizeLimitMiddleware, max_size=settings.MAX_REQUEST_SIZE)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Exception handlers
@app.exception_handler(KnowZoneError)
async def knowzone_exception_handler(request: Request, exc: KnowZoneError):
    if exc.status_code >= 500:
        logger.log_error_with_context(exc, f"{request.method} {request.url.path}")
    return JSONResponse(status_code=exc.status_code, content=error_response(exc))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = [
        {
            "field": ".".join(str(part) for part in error["loc"] if part != "body"),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request data", "details": jsonable_encoder(details)},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Global exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "message": str(exc) if settings.DEBUG else "An error occurred"
        }
    )


# Health check endpoint
@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "app_name": settings.APP_NAME,
        "version": "1.0.0",
        "environment": settings.ENVIRONMENT
    }


# Include API router
app.include_router(api_router, prefix=settings.API_PREFIX)


def run():
    """Console entry point"""
    import uvicorn
    uvicorn.run(
        "knowzone.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
