"""Create the schema and seed the admin account and default site settings."""
from __future__ import annotations

import argparse

from microblog.core.settings import settings
from microblog.db.session import SessionLocal, create_tables
from microblog.services.seed import seed_defaults


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Seed the microblog admin user and settings")
    parser.add_argument(
        "--username",
        default=settings.admin_username,
        help="Admin username (defaults to ADMIN_USERNAME)",
    )
    parser.add_argument(
        "--password",
        default=settings.admin_password,
        help="Admin password used only when the user is created (defaults to ADMIN_PASSWORD)",
    )
    args = parser.parse_args(argv)

    create_tables()
    db = SessionLocal()
    try:
        report = seed_defaults(db, args.username, args.password)
    finally:
        db.close()

    if report.admin_created:
        print(f"[seed] created admin user {args.username!r}")
    else:
        print("[seed] an admin user already exists, leaving it unchanged")
    for key in report.settings_created:
        print(f"[seed] default setting {key} stored")
    print("[seed] done")


if __name__ == "__main__":
    main()
