"""Key/value site settings edited by the administrator."""
from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from microblog.db.session import Base

SITE_NAME = "site_name"
SITE_TAGLINE = "site_tagline"
POSTS_PUBLIC = "posts_public"

DEFAULT_SITE_SETTINGS: dict[str, str] = {
    SITE_NAME: "Microblog",
    SITE_TAGLINE: "Share your thoughts with the world",
    POSTS_PUBLIC: "true",
}


class SiteSetting(Base):
    """One site-level setting stored as text."""

    __tablename__ = "settings"

    key: Mapped[str] = mapped_column(Text, primary_key=True)
    value: Mapped[str | None] = mapped_column(Text, nullable=True)
