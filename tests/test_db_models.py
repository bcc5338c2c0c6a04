"""Mapping checks for the ORM models in microblog.models."""

from microblog.models import Post, SiteSetting, User


def test_table_names():
    """Model classes expose expected __tablename__ values."""
    assert Post.__tablename__ == "posts"
    assert User.__tablename__ == "users"
    assert SiteSetting.__tablename__ == "settings"


def test_post_id_is_text_primary_key():
    """Post identifiers are opaque strings."""
    pk = [c.name for c in Post.__table__.primary_key]
    assert pk == ["id"]
    assert Post.__table__.c.id.type.python_type is str


def test_username_is_unique():
    """The store itself enforces username uniqueness."""
    assert User.__table__.c.username.unique is True
    assert User.__table__.c.username.nullable is False


def test_setting_keyed_by_name():
    pk = [c.name for c in SiteSetting.__table__.primary_key]
    assert pk == ["key"]
