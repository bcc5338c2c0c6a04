# src/microblog/db/time.py
"""Time utilities for database models."""

from datetime import UTC, datetime


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(UTC)


def utc_timestamp() -> str:
    """Return the current UTC time as an ISO-8601 string ending in ``Z``.

    The fixed width keeps lexical order identical to chronological order.
    """
    return utcnow().isoformat(timespec="microseconds").replace("+00:00", "Z")
