# src/microblog/models/user.py
"""SQLAlchemy model for the administrator identity."""

from __future__ import annotations

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from microblog.db.session import Base


class User(Base):
    """Login identity for the site administrator.

    A single row is expected, although the schema allows more.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
