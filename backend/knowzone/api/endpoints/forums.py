from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from knowzone.core.database import get_repository
from knowzone.core.exceptions import KnowZoneError, ResourceNotFoundError
from knowzone.core.logging_config import logger
from knowzone.db.repository import Repository
from knowzone.models import ForumPost, User
from knowzone.modules.auth.dependencies import get_current_user
from knowzone.schemas.forum import ForumPostCreate, ForumPostWithAuthor
from knowzone.services.projections import join_all, with_author

router = APIRouter(prefix="/forums", tags=["Forums"])


@router.get("/{forum_name}/posts", response_model=List[ForumPostWithAuthor])
async def list_forum_posts(
    forum_name: str,
    repository: Repository = Depends(get_repository)
):
    """
    Posts in a forum, each with its author.
    Public endpoint - anonymous posts come back with ``author: null``.
    """
    posts = await repository.get_forum_posts_by_forum(forum_name)
    return await join_all(with_author, repository, posts)


@router.post("/posts", response_model=ForumPost)
async def create_forum_post(
    payload: ForumPostCreate,
    current_user: User = Depends(get_current_user),
    repository: Repository = Depends(get_repository)
):
    try:
        post = await repository.create_forum_post({
            **payload.model_dump(),
            "author_id": current_user.id,
        })
        logger.info(f"Forum post {post.id} created in '{post.forum_name}' by user {current_user.id}")
        return post

    except KnowZoneError:
        raise
    except Exception as e:
        logger.error(f"Error creating forum post: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create post"
        )


@router.put("/posts/{post_id}/like", response_model=ForumPost)
async def like_forum_post(
    post_id: int,
    current_user: User = Depends(get_current_user),
    repository: Repository = Depends(get_repository)
):
    """Add one like. Repeat likes from the same user all count."""
    post = await repository.get_forum_post(post_id)
    if not post:
        raise ResourceNotFoundError("Post", post_id)

    return await repository.update_forum_post(post_id, {"likes": post.likes + 1})
