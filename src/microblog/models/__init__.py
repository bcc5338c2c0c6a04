# src/microblog/models/__init__.py
"""SQLAlchemy models for the Microblog application."""

from .post import Post
from .setting import SiteSetting
from .user import User

__all__ = [
    "Post",
    "SiteSetting",
    "User",
]
