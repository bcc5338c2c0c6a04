# src/microblog/services/__init__.py
"""Business logic services for the Microblog application."""

from .credentials import CredentialManager, ProfileChange
from .post_service import PostLedger
from .seed import seed_defaults
from .site_settings import SiteSettingsResolver
from .visibility import can_view_posts, visible_posts

__all__ = [
    "CredentialManager",
    "ProfileChange",
    "PostLedger",
    "SiteSettingsResolver",
    "can_view_posts",
    "seed_defaults",
    "visible_posts",
]
