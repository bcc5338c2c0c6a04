"""Domain exceptions shared by the service layer."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class MicroblogError(Exception):
    """Base exception for all service-level failures.

    The message is safe to show to API callers.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(MicroblogError):
    """Raised when caller input is missing or malformed."""


class AuthError(MicroblogError):
    """Raised when presented credentials do not check out."""


class NotFoundError(MicroblogError):
    """Raised when a referenced entity does not exist."""


class UserNotFoundError(NotFoundError, AuthError):
    """Raised when a profile update names an unknown user."""


class StoreError(MicroblogError):
    """Raised when the underlying store fails; details stay in the logs."""


@contextmanager
def store_errors(db: Session, message: str) -> Iterator[None]:
    """Translate SQLAlchemy failures into :class:`StoreError`.

    The session is rolled back and the original error logged with its
    traceback before the generic ``message`` is raised in its place.
    """
    try:
        yield
    except SQLAlchemyError as err:
        db.rollback()
        logger.error("%s: %s", message, err, exc_info=True)
        raise StoreError(message) from err
