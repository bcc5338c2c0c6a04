"""Data access helpers for working with posts."""
from __future__ import annotations

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from microblog.models.post import Post

__all__ = ["PostRepository"]


class PostRepository:
    """Thin wrapper around database access for post entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def list_recent(self, limit: int | None = None, offset: int = 0) -> list[Post]:
        """Return posts newest first, optionally windowed by limit/offset."""
        stmt = select(Post).order_by(Post.timestamp.desc(), Post.id.desc())
        if limit is not None:
            stmt = stmt.limit(limit).offset(offset)
        result = self.session.execute(stmt)
        return list(result.scalars())

    def count(self) -> int:
        """Return the total number of stored posts."""
        return int(self.session.scalar(select(func.count()).select_from(Post)) or 0)

    def create(self, *, post_id: str, content: str, timestamp: str) -> Post:
        """Insert a new post and return the persisted ORM instance."""
        post = Post(id=post_id, content=content, timestamp=timestamp)
        self.session.add(post)
        self.session.flush()
        return post

    def delete(self, post_id: str) -> int:
        """Delete the post with ``post_id`` and return the number of rows removed."""
        result = self.session.execute(delete(Post).where(Post.id == post_id))
        return int(result.rowcount or 0)
