"""Post ledger: create, list, count and delete feed posts."""
from __future__ import annotations

import logging
import uuid

from sqlalchemy.orm import Session

from microblog.core.errors import ValidationError, store_errors
from microblog.core.settings import settings
from microblog.db.time import utc_timestamp
from microblog.models.post import Post
from microblog.repositories.post_repo import PostRepository

logger = logging.getLogger(__name__)


def new_post_id() -> str:
    """Return a fresh opaque post identifier."""
    return uuid.uuid4().hex


class PostLedger:
    """Service handling the post table.

    Visibility is not checked here; callers apply the visibility policy
    before listing.
    """

    def __init__(self, db: Session, max_length: int | None = None) -> None:
        self.db = db
        self.repo = PostRepository(db)
        self.max_length = max_length if max_length is not None else settings.post_max_length

    def list_posts(self, limit: int | None = None, page: int | None = None) -> list[Post]:
        """Return posts newest first.

        Args:
            limit: Maximum number of posts; all posts when omitted.
            page: 1-indexed page of ``limit`` posts. Ignored without ``limit``.

        Raises:
            ValidationError: If ``limit`` or ``page`` is not positive.
        """
        if limit is not None and limit < 1:
            raise ValidationError("Limit must be a positive integer")
        if page is not None and page < 1:
            raise ValidationError("Page must be a positive integer")

        offset = 0
        if limit is not None and page is not None:
            offset = (page - 1) * limit

        with store_errors(self.db, "Failed to fetch posts"):
            return self.repo.list_recent(limit=limit, offset=offset)

    def count(self) -> int:
        """Return the total number of posts, regardless of visibility."""
        with store_errors(self.db, "Failed to fetch post count"):
            return self.repo.count()

    def create(self, content: object) -> Post:
        """Store a new post and return it.

        Raises:
            ValidationError: If the content is missing, blank or over the
                configured length cap.
        """
        if not isinstance(content, str) or not content.strip():
            raise ValidationError("Content is required")
        if self.max_length is not None and len(content) > self.max_length:
            raise ValidationError(f"Content exceeds {self.max_length} characters")

        with store_errors(self.db, "Failed to create post"):
            post = self.repo.create(
                post_id=new_post_id(),
                content=content,
                timestamp=utc_timestamp(),
            )
            self.db.commit()
            self.db.refresh(post)

        logger.info("Created post %s", post.id)
        return post

    def delete(self, post_id: object) -> None:
        """Delete a post by identifier.

        Unknown identifiers are not an error; the call succeeds either way.
        """
        if not isinstance(post_id, str) or not post_id:
            raise ValidationError("Post ID is required")

        with store_errors(self.db, "Failed to delete post"):
            removed = self.repo.delete(post_id)
            self.db.commit()

        if removed:
            logger.info("Deleted post %s", post_id)
        else:
            logger.debug("Delete requested for unknown post %s", post_id)
