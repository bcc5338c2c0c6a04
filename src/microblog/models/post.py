# src/microblog/models/post.py
"""SQLAlchemy model for feed posts."""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from microblog.db.session import Base


class Post(Base):
    """A short text entry in the feed.

    Posts are immutable once written; the only mutation is deletion.
    """

    __tablename__ = "posts"

    # Opaque random identifier, exposed to clients as a string.
    id: Mapped[str] = mapped_column(Text, primary_key=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    # ISO-8601 UTC string; the feed sorts on it descending.
    timestamp: Mapped[str] = mapped_column(Text, nullable=False, index=True)
