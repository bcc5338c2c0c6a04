# src/microblog/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .common import MessageResponse, StatsResponse
from .post import PostCount, PostCreate, PostDelete, PostResponse
from .site_settings import SiteSettingsResponse, SiteSettingsUpdate
from .user import LoginRequest, LoginResponse, ProfileUpdateRequest, ProfileUpdateResponse

__all__ = [
    "MessageResponse", "StatsResponse",
    "PostCount", "PostCreate", "PostDelete", "PostResponse",
    "SiteSettingsResponse", "SiteSettingsUpdate",
    "LoginRequest", "LoginResponse", "ProfileUpdateRequest", "ProfileUpdateResponse",
]
