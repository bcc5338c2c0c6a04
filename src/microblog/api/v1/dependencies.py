"""Shared API dependencies for the admin claim and service construction."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from microblog.core import security
from microblog.core.settings import settings
from microblog.db.session import get_db
from microblog.services.credentials import CredentialManager
from microblog.services.post_service import PostLedger
from microblog.services.site_settings import SiteSettingsResolver

# Reads are open to everyone, so a missing or foreign header is not an error.
bearer_scheme = HTTPBearer(auto_error=False)

# Legacy clients send this literal in place of a token.
LEGACY_ADMIN_TOKEN = "true"

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_admin_claim(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> bool:
    """Return True if the request carries an admin claim.

    Two forms are accepted: the exact header ``Authorization: Bearer true``
    (when the legacy claim is enabled) and a signed token issued by
    ``POST /auth``. The legacy form is not verified in any way.

    Args:
        credentials: Parsed bearer credentials, or None when absent

    Returns:
        Whether the caller is treated as the administrator
    """
    if credentials is None:
        return False
    if (
        settings.legacy_admin_claim
        and credentials.scheme == "Bearer"
        and credentials.credentials == LEGACY_ADMIN_TOKEN
    ):
        return True
    return security.is_admin_token(credentials.credentials)


# Type alias for admin claim dependency
AdminClaimDep = Annotated[bool, Depends(get_admin_claim)]


def require_admin_for_writes(is_admin: AdminClaimDep) -> None:
    """Reject mutating requests without an admin claim when enforcement is on.

    Raises:
        HTTPException: If ``ENFORCE_ADMIN_WRITES`` is set and the caller is not admin
    """
    if settings.enforce_admin_writes and not is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin privileges required",
        )


def get_post_ledger(db: SessionDep) -> PostLedger:
    """Return a post ledger bound to the request session."""
    return PostLedger(db)


def get_settings_resolver(db: SessionDep) -> SiteSettingsResolver:
    """Return a settings resolver bound to the request session."""
    return SiteSettingsResolver(db)


def get_credential_manager(db: SessionDep) -> CredentialManager:
    """Return a credential manager bound to the request session."""
    return CredentialManager(db)


PostLedgerDep = Annotated[PostLedger, Depends(get_post_ledger)]
SettingsResolverDep = Annotated[SiteSettingsResolver, Depends(get_settings_resolver)]
CredentialManagerDep = Annotated[CredentialManager, Depends(get_credential_manager)]
AdminWriteDep = Depends(require_admin_for_writes)
