# src/microblog/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .auth import router as auth_router
from .posts import router as posts_router
from .site_settings import router as site_settings_router
from .system import router as system_router

__all__ = [
    "auth_router",
    "posts_router",
    "site_settings_router",
    "system_router",
]
