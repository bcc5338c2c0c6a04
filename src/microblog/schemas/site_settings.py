"""Site settings schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SiteSettingsResponse(BaseModel):
    """Effective site settings, defaults applied."""

    site_name: str
    site_tagline: str
    posts_public: bool


class SiteSettingsUpdate(BaseModel):
    """Raw settings update.

    Fields are deliberately untyped: type and emptiness checks belong to the
    settings resolver, and "provided" means the key is present in the body
    (including an explicit ``null``).
    """

    site_name: Any = Field(None, description="Site name (required)")
    site_tagline: Any = Field(None, description="Optional tagline")
    posts_public: Any = Field(None, description="Optional boolean visibility flag")

    model_config = ConfigDict(extra="ignore")
