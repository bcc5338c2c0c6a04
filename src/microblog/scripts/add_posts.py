"""Insert sample posts for local development."""
from __future__ import annotations

import argparse

from sqlalchemy.orm import Session

from microblog.db.session import SessionLocal, create_tables
from microblog.models import Post
from microblog.services.post_service import PostLedger

DEFAULT_COUNT = 15


def add_sample_posts(db: Session, count: int = DEFAULT_COUNT) -> list[Post]:
    """Create ``count`` numbered sample posts and return them in creation order."""
    ledger = PostLedger(db)
    return [ledger.create(f"This is test post number {i + 1}.") for i in range(count)]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Add sample posts to the microblog store")
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT, help="Number of posts to add")
    args = parser.parse_args(argv)
    if args.count < 1:
        parser.error("--count must be positive")

    create_tables()
    db = SessionLocal()
    try:
        posts = add_sample_posts(db, args.count)
    finally:
        db.close()
    print(f"{len(posts)} test posts added.")


if __name__ == "__main__":
    main()
