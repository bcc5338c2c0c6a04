# tests/test_services.py
"""Tests for service layer components."""

from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy.exc import OperationalError

from microblog.core.errors import (
    AuthError,
    NotFoundError,
    StoreError,
    UserNotFoundError,
    ValidationError,
)
from microblog.core.security import hash_password, verify_password
from microblog.models import Post, SiteSetting, User
from microblog.repositories.post_repo import PostRepository
from microblog.services.credentials import CredentialManager, ProfileChange
from microblog.services.post_service import PostLedger
from microblog.services.site_settings import SiteSettingsResolver
from microblog.services.visibility import can_view_posts, visible_posts

from tests.conftest import ADMIN_PASSWORD, ADMIN_USERNAME


class TestSiteSettingsResolver:
    """Settings resolver defaults, validation and upserts."""

    def test_defaults_on_empty_store(self, db_session) -> None:
        resolver = SiteSettingsResolver(db_session)
        assert resolver.get_settings() == {
            "site_name": "Microblog",
            "site_tagline": "Share your thoughts with the world",
            "posts_public": True,
        }
        assert resolver.posts_public() is True

    def test_stored_values_override_defaults(self, db_session) -> None:
        db_session.add_all([
            SiteSetting(key="site_name", value="Notes"),
            SiteSetting(key="posts_public", value="false"),
        ])
        db_session.commit()

        settings = SiteSettingsResolver(db_session).get_settings()
        assert settings["site_name"] == "Notes"
        assert settings["site_tagline"] == "Share your thoughts with the world"
        assert settings["posts_public"] is False

    def test_update_only_touches_provided_fields(self, db_session) -> None:
        resolver = SiteSettingsResolver(db_session)
        resolver.update_settings(site_name="First", site_tagline="Tag", posts_public=False)
        resolver.update_settings(site_name="Second")

        settings = resolver.get_settings()
        assert settings == {"site_name": "Second", "site_tagline": "Tag", "posts_public": False}
        assert db_session.get(SiteSetting, "posts_public").value == "false"

    @pytest.mark.parametrize("site_name", [None, "", "   ", 42])
    def test_site_name_required(self, db_session, site_name) -> None:
        with pytest.raises(ValidationError, match="Site name is required"):
            SiteSettingsResolver(db_session).update_settings(site_name=site_name)

    @pytest.mark.parametrize("tagline", [None, "", "  ", 7])
    def test_provided_tagline_must_not_be_blank(self, db_session, tagline) -> None:
        with pytest.raises(ValidationError, match="Site tagline cannot be empty"):
            SiteSettingsResolver(db_session).update_settings(site_name="Ok", site_tagline=tagline)

    @pytest.mark.parametrize("flag", [None, "true", 1, 0])
    def test_posts_public_must_be_boolean(self, db_session, flag) -> None:
        with pytest.raises(ValidationError, match="must be a boolean"):
            SiteSettingsResolver(db_session).update_settings(site_name="Ok", posts_public=flag)

    def test_invalid_update_writes_nothing(self, db_session) -> None:
        resolver = SiteSettingsResolver(db_session)
        with pytest.raises(ValidationError):
            resolver.update_settings(site_name="Changed", posts_public="no")
        assert db_session.query(SiteSetting).count() == 0


class TestVisibilityPolicy:
    """Feed visibility decisions."""

    @pytest.mark.parametrize(
        ("posts_public", "is_admin", "expected"),
        [(True, False, True), (True, True, True), (False, True, True), (False, False, False)],
    )
    def test_can_view_posts(self, posts_public, is_admin, expected) -> None:
        assert can_view_posts(posts_public=posts_public, is_admin=is_admin) is expected

    def test_private_feed_skips_fetch(self) -> None:
        fetch = MagicMock(return_value=["a", "b"])
        assert visible_posts(posts_public=False, is_admin=False, fetch=fetch) == []
        fetch.assert_not_called()

    def test_admin_sees_private_feed(self) -> None:
        fetch = MagicMock(return_value=("a", "b"))
        assert visible_posts(posts_public=False, is_admin=True, fetch=fetch) == ["a", "b"]
        fetch.assert_called_once_with()


class TestPostLedger:
    """Post ledger ordering, pagination and lifecycle."""

    def test_list_orders_newest_first(self, db_session, make_post) -> None:
        make_post("middle", "2026-03-02T00:00:00.000000Z")
        make_post("newest", "2026-03-03T00:00:00.000000Z")
        make_post("oldest", "2026-03-01T00:00:00.000000Z")

        posts = PostLedger(db_session).list_posts()
        assert [p.content for p in posts] == ["newest", "middle", "oldest"]

    def test_pagination_slices(self, db_session, make_post) -> None:
        for i in range(7):
            make_post(f"post {i}")
        ledger = PostLedger(db_session)
        everything = ledger.list_posts()

        assert ledger.list_posts(limit=3) == everything[:3]
        assert ledger.list_posts(limit=3, page=1) == everything[0:3]
        assert ledger.list_posts(limit=3, page=2) == everything[3:6]
        assert ledger.list_posts(limit=3, page=3) == everything[6:7]
        assert ledger.list_posts(limit=3, page=4) == []

    def test_page_without_limit_is_ignored(self, db_session, make_post) -> None:
        make_post()
        make_post()
        assert len(PostLedger(db_session).list_posts(page=2)) == 2

    @pytest.mark.parametrize(("limit", "page"), [(0, None), (-1, None), (5, 0), (5, -2)])
    def test_non_positive_pagination_rejected(self, db_session, limit, page) -> None:
        with pytest.raises(ValidationError):
            PostLedger(db_session).list_posts(limit=limit, page=page)

    def test_end_to_end_lifecycle(self, db_session) -> None:
        ledger = PostLedger(db_session)
        post = ledger.create("hello")

        assert post.content == "hello"
        assert post.id
        assert post.timestamp.endswith("Z")
        assert ledger.count() == 1
        assert ledger.list_posts(limit=10) == [post]

        ledger.delete(post.id)
        assert ledger.count() == 0
        assert ledger.list_posts() == []

    def test_created_ids_are_unique(self, db_session) -> None:
        ledger = PostLedger(db_session)
        ids = {ledger.create(f"post {i}").id for i in range(20)}
        assert len(ids) == 20

    def test_content_stored_as_submitted(self, db_session) -> None:
        post = PostLedger(db_session).create("  padded  ")
        assert post.content == "  padded  "

    @pytest.mark.parametrize("content", [None, "", "   \n", 5])
    def test_create_requires_content(self, db_session, content) -> None:
        with pytest.raises(ValidationError, match="Content is required"):
            PostLedger(db_session).create(content)
        assert db_session.query(Post).count() == 0

    def test_length_cap_when_configured(self, db_session) -> None:
        ledger = PostLedger(db_session, max_length=10)
        ledger.create("x" * 10)
        with pytest.raises(ValidationError, match="exceeds 10 characters"):
            ledger.create("x" * 11)

    def test_no_length_cap_by_default(self, db_session) -> None:
        post = PostLedger(db_session).create("x" * 5000)
        assert len(post.content) == 5000

    def test_delete_unknown_id_is_silent(self, db_session, make_post) -> None:
        make_post()
        ledger = PostLedger(db_session)
        ledger.delete("does-not-exist")
        assert ledger.count() == 1

    @pytest.mark.parametrize("post_id", [None, ""])
    def test_delete_requires_id(self, db_session, post_id) -> None:
        with pytest.raises(ValidationError, match="Post ID is required"):
            PostLedger(db_session).delete(post_id)

    def test_store_failure_becomes_store_error(self, db_session) -> None:
        failure = OperationalError("SELECT 1", {}, Exception("disk I/O error"))
        with patch.object(PostRepository, "count", side_effect=failure):
            with pytest.raises(StoreError) as exc_info:
                PostLedger(db_session).count()
        assert exc_info.value.message == "Failed to fetch post count"
        assert "disk" not in str(exc_info.value)


class TestCredentialManager:
    """Login and profile update rules."""

    def test_authenticate_success(self, db_session, admin_user) -> None:
        user = CredentialManager(db_session).authenticate(ADMIN_USERNAME, ADMIN_PASSWORD)
        assert user.id == admin_user.id

    @pytest.mark.parametrize(
        ("username", "password"),
        [(ADMIN_USERNAME, "wrong"), ("nobody", ADMIN_PASSWORD), (None, None), ("", "")],
    )
    def test_authenticate_same_error_for_every_failure(
        self, db_session, admin_user, username, password
    ) -> None:
        with pytest.raises(AuthError) as exc_info:
            CredentialManager(db_session).authenticate(username, password)
        assert exc_info.value.message == "Invalid credentials"

    def test_update_requires_current_credentials(self, db_session, admin_user) -> None:
        change = ProfileChange(current_username=ADMIN_USERNAME, current_password=None)
        with pytest.raises(ValidationError, match="Current username and password are required"):
            CredentialManager(db_session).update_profile(change)

    def test_update_unknown_user(self, db_session, admin_user) -> None:
        change = ProfileChange(current_username="ghost", current_password="whatever")
        with pytest.raises(UserNotFoundError) as exc_info:
            CredentialManager(db_session).update_profile(change)
        assert isinstance(exc_info.value, NotFoundError)
        assert isinstance(exc_info.value, AuthError)

    def test_wrong_password_fails_regardless_of_other_fields(self, db_session, admin_user) -> None:
        change = ProfileChange(
            current_username=ADMIN_USERNAME,
            current_password="not-it",
            new_username="fresh",
            new_password="abc",
            confirm_password="mismatch",
        )
        with pytest.raises(AuthError, match="Current password is incorrect"):
            CredentialManager(db_session).update_profile(change)

    def test_taken_username_applies_nothing(self, db_session, admin_user) -> None:
        db_session.add(User(username="taken", password_hash=hash_password("irrelevant")))
        db_session.commit()

        change = ProfileChange(
            current_username=ADMIN_USERNAME,
            current_password=ADMIN_PASSWORD,
            new_username="taken",
            new_password="brand-new-password",
        )
        with pytest.raises(ValidationError, match="Username already exists"):
            CredentialManager(db_session).update_profile(change)

        db_session.refresh(admin_user)
        assert admin_user.username == ADMIN_USERNAME
        assert verify_password(ADMIN_PASSWORD, admin_user.password_hash)

    def test_mismatched_confirmation(self, db_session, admin_user) -> None:
        change = ProfileChange(
            current_username=ADMIN_USERNAME,
            current_password=ADMIN_PASSWORD,
            new_password="secret1",
            confirm_password="secret2",
        )
        with pytest.raises(ValidationError, match="New passwords do not match"):
            CredentialManager(db_session).update_profile(change)

    def test_short_password(self, db_session, admin_user) -> None:
        change = ProfileChange(
            current_username=ADMIN_USERNAME,
            current_password=ADMIN_PASSWORD,
            new_password="12345",
        )
        with pytest.raises(ValidationError, match="at least 6 characters"):
            CredentialManager(db_session).update_profile(change)

    def test_username_only_change(self, db_session, admin_user) -> None:
        old_hash = admin_user.password_hash
        change = ProfileChange(
            current_username=ADMIN_USERNAME,
            current_password=ADMIN_PASSWORD,
            new_username="editor",
        )
        assert CredentialManager(db_session).update_profile(change) == "editor"

        db_session.refresh(admin_user)
        assert admin_user.username == "editor"
        assert admin_user.password_hash == old_hash

    def test_password_only_change(self, db_session, admin_user) -> None:
        change = ProfileChange(
            current_username=ADMIN_USERNAME,
            current_password=ADMIN_PASSWORD,
            new_password="new-secret",
            confirm_password="new-secret",
        )
        assert CredentialManager(db_session).update_profile(change) == ADMIN_USERNAME

        db_session.refresh(admin_user)
        assert admin_user.username == ADMIN_USERNAME
        assert verify_password("new-secret", admin_user.password_hash)
        assert not verify_password(ADMIN_PASSWORD, admin_user.password_hash)

    def test_same_username_is_not_a_collision(self, db_session, admin_user) -> None:
        change = ProfileChange(
            current_username=ADMIN_USERNAME,
            current_password=ADMIN_PASSWORD,
            new_username=ADMIN_USERNAME,
        )
        assert CredentialManager(db_session).update_profile(change) == ADMIN_USERNAME

    def test_count_users(self, db_session, admin_user) -> None:
        assert CredentialManager(db_session).count_users() == 1


def test_password_hashing_round_trip() -> None:
    hashed = hash_password("correct horse", rounds=4)
    assert hashed != "correct horse"
    assert verify_password("correct horse", hashed)
    assert not verify_password("wrong horse", hashed)
    assert not verify_password("anything", "not-a-bcrypt-hash")
