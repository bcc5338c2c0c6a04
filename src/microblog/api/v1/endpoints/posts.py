# src/microblog/api/v1/endpoints/posts.py
"""Post-related endpoints for the Microblog API."""

from fastapi import APIRouter, HTTPException, Query, status

from microblog.api.v1.dependencies import (
    AdminClaimDep,
    AdminWriteDep,
    PostLedgerDep,
    SettingsResolverDep,
)
from microblog.core.errors import ValidationError
from microblog.models import Post
from microblog.schemas.common import MessageResponse
from microblog.schemas.post import PostCount, PostCreate, PostDelete, PostResponse
from microblog.services.visibility import visible_posts

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=list[PostResponse])
async def list_posts(
    ledger: PostLedgerDep,
    resolver: SettingsResolverDep,
    is_admin: AdminClaimDep,
    limit: int | None = Query(None, alias="_limit", description="Maximum number of posts"),
    page: int | None = Query(None, alias="_page", description="1-indexed page of _limit posts"),
) -> list[Post]:
    """List posts newest first, honouring the site's visibility setting.

    Args:
        ledger: Post ledger for the request
        resolver: Site settings resolver
        is_admin: Whether the caller presented an admin claim
        limit: Maximum number of posts to return
        page: Page number, used together with limit

    Returns:
        Posts in descending timestamp order, or an empty list when the feed is
        private and the caller is not admin

    Raises:
        HTTPException: If limit or page is not positive
    """
    try:
        return visible_posts(
            posts_public=resolver.posts_public(),
            is_admin=is_admin,
            fetch=lambda: ledger.list_posts(limit=limit, page=page),
        )
    except ValidationError as err:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=err.message,
        ) from err


@router.get("/count", response_model=PostCount)
async def count_posts(ledger: PostLedgerDep) -> PostCount:
    """Return the total number of posts (not subject to visibility)."""
    return PostCount(count=ledger.count())


@router.post(
    "",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[AdminWriteDep],
)
async def create_post(payload: PostCreate, ledger: PostLedgerDep) -> Post:
    """Create a new post.

    Raises:
        HTTPException: If the content is missing or too long
    """
    try:
        return ledger.create(payload.content)
    except ValidationError as err:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=err.message,
        ) from err


@router.delete("", response_model=MessageResponse, dependencies=[AdminWriteDep])
async def delete_post(payload: PostDelete, ledger: PostLedgerDep) -> MessageResponse:
    """Delete a post by identifier; unknown identifiers also succeed."""
    try:
        ledger.delete(payload.id)
    except ValidationError as err:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=err.message,
        ) from err
    return MessageResponse(message="Post deleted successfully")
