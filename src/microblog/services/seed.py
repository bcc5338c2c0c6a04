"""Idempotent seeding of the admin account and default site settings."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from microblog.core import security
from microblog.models.setting import DEFAULT_SITE_SETTINGS, SiteSetting
from microblog.models.user import User
from microblog.services.site_settings import SiteSettingsResolver

logger = logging.getLogger(__name__)


@dataclass
class SeedReport:
    """What a seeding run created."""

    admin_created: bool = False
    settings_created: list[str] = field(default_factory=list)


def seed_defaults(db: Session, admin_username: str, admin_password: str) -> SeedReport:
    """Create the admin user and default settings where they are missing.

    The admin is only created while the users table is empty; once any
    account exists (including one renamed through a profile update) it is
    left alone. Existing rows are never modified, so this is safe to run on
    every start.
    """
    report = SeedReport()

    user_count = db.scalar(select(func.count()).select_from(User)) or 0
    if user_count == 0:
        db.add(
            User(
                username=admin_username,
                password_hash=security.hash_password(admin_password),
            )
        )
        report.admin_created = True

    for key in SiteSettingsResolver(db).missing_keys():
        db.add(SiteSetting(key=key, value=DEFAULT_SITE_SETTINGS[key]))
        report.settings_created.append(key)

    db.commit()

    if report.admin_created:
        logger.info("Seeded admin user %s", admin_username)
    if report.settings_created:
        logger.info("Seeded default settings: %s", ", ".join(report.settings_created))
    return report
