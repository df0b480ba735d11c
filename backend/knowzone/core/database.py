"""
Repository lifecycle.

One ``Repository`` is built per application at startup and stored on
``app.state``. Endpoints receive it through the ``get_repository``
dependency, which tests override with a fresh instance.
"""
from fastapi import Request

from knowzone.core.config import settings
from knowzone.core.logging_config import logger
from knowzone.db.repository import Repository
from knowzone.db.seed_data import seed_repository


async def init_repository(seed: bool = settings.SEED_SAMPLE_DATA) -> Repository:
    """Create the repository, loading sample data when ``seed`` is set"""
    repository = Repository()
    if seed:
        await seed_repository(repository)
    logger.info("Repository initialized (in-memory)")
    return repository


def get_repository(request: Request) -> Repository:
    """
    Dependency for getting the repository

    Usage:
        @app.get("/items")
        async def get_items(repository: Repository = Depends(get_repository)):
            ...
    """
    return request.app.state.repository
