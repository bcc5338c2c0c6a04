"""Feed visibility policy.

A single site-wide switch decides who may read the feed: when ``posts_public``
is on everyone sees every post, when it is off only callers presenting an
admin claim do. There is no per-post visibility.
"""
from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

T = TypeVar("T")


def can_view_posts(*, posts_public: bool, is_admin: bool) -> bool:
    """Return True if a caller may read the feed under the current setting."""
    return posts_public or is_admin


def visible_posts(
    *,
    posts_public: bool,
    is_admin: bool,
    fetch: Callable[[], Sequence[T]],
) -> list[T]:
    """Return the posts a caller may see.

    ``fetch`` is only invoked when the caller is allowed to read the feed, so a
    hidden feed never touches the post table.
    """
    if not can_view_posts(posts_public=posts_public, is_admin=is_admin):
        return []
    return list(fetch())
