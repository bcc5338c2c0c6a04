"""Site settings resolver backed by the ``settings`` table."""
from __future__ import annotations

import logging
from typing import Any, Final

from sqlalchemy import select
from sqlalchemy.orm import Session

from microblog.core.errors import ValidationError, store_errors
from microblog.models.setting import (
    DEFAULT_SITE_SETTINGS,
    POSTS_PUBLIC,
    SITE_NAME,
    SITE_TAGLINE,
    SiteSetting,
)

logger = logging.getLogger(__name__)

# Marks an optional field the caller left out, as opposed to sending null.
UNSET: Final = object()


def _parse_bool(value: str | None) -> bool:
    return value == "true"


class SiteSettingsResolver:
    """Read and write site settings, falling back to defaults for missing keys.

    There is no cache: every read goes to the store.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def _get_value(self, key: str) -> str:
        row = self.db.get(SiteSetting, key)
        if row is None or row.value is None:
            return DEFAULT_SITE_SETTINGS[key]
        return row.value

    def _upsert(self, key: str, value: str) -> None:
        row = self.db.get(SiteSetting, key)
        if row is None:
            self.db.add(SiteSetting(key=key, value=value))
        else:
            row.value = value
        self.db.commit()

    def get_settings(self) -> dict[str, Any]:
        """Return ``site_name``, ``site_tagline`` and ``posts_public`` with defaults applied."""
        with store_errors(self.db, "Failed to fetch site settings"):
            return {
                SITE_NAME: self._get_value(SITE_NAME),
                SITE_TAGLINE: self._get_value(SITE_TAGLINE),
                POSTS_PUBLIC: _parse_bool(self._get_value(POSTS_PUBLIC)),
            }

    def posts_public(self) -> bool:
        """Return whether the feed is readable by anonymous callers."""
        with store_errors(self.db, "Failed to fetch site settings"):
            return _parse_bool(self._get_value(POSTS_PUBLIC))

    def update_settings(
        self,
        site_name: object = None,
        site_tagline: object = UNSET,
        posts_public: object = UNSET,
    ) -> None:
        """Validate and store a settings update.

        Args:
            site_name: Required, non-blank string.
            site_tagline: Optional; when provided it must be a non-blank string.
            posts_public: Optional; when provided it must be a boolean.

        Raises:
            ValidationError: If any provided field is invalid. Nothing is
                written in that case.
        """
        if not isinstance(site_name, str) or not site_name.strip():
            raise ValidationError("Site name is required")

        if site_tagline is not UNSET and (
            not isinstance(site_tagline, str) or not site_tagline.strip()
        ):
            raise ValidationError("Site tagline cannot be empty")

        if posts_public is not UNSET and not isinstance(posts_public, bool):
            raise ValidationError("Posts public setting must be a boolean")

        updated = [SITE_NAME]
        # Keys are written one at a time; a failure part-way leaves earlier keys applied.
        with store_errors(self.db, "Failed to update site settings"):
            self._upsert(SITE_NAME, site_name)
            if site_tagline is not UNSET:
                self._upsert(SITE_TAGLINE, site_tagline)
                updated.append(SITE_TAGLINE)
            if posts_public is not UNSET:
                self._upsert(POSTS_PUBLIC, "true" if posts_public else "false")
                updated.append(POSTS_PUBLIC)

        logger.info("Site settings updated: %s", ", ".join(updated))

    def missing_keys(self) -> list[str]:
        """Return the recognized keys that have no stored row."""
        stored = set(self.db.scalars(select(SiteSetting.key)))
        return [key for key in DEFAULT_SITE_SETTINGS if key not in stored]
