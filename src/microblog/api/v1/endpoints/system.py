"""Dashboard statistics endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from microblog.api.v1.dependencies import CredentialManagerDep, PostLedgerDep
from microblog.schemas.common import StatsResponse

router = APIRouter(tags=["system"])


@router.get("/stats", response_model=StatsResponse)
async def get_stats(
    ledger: PostLedgerDep,
    credentials: CredentialManagerDep,
) -> StatsResponse:
    """Return post and user counts for the admin dashboard."""
    return StatsResponse(postCount=ledger.count(), userCount=credentials.count_users())
