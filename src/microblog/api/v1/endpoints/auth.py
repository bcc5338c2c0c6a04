# src/microblog/api/v1/endpoints/auth.py
"""Authentication endpoints for the Microblog API."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from microblog.api.v1.dependencies import CredentialManagerDep
from microblog.core.errors import AuthError, NotFoundError, ValidationError
from microblog.core.security import create_access_token
from microblog.schemas.user import (
    LoginRequest,
    LoginResponse,
    ProfileUpdateRequest,
    ProfileUpdateResponse,
)
from microblog.services.credentials import ProfileChange

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post(
    "",
    summary="Log in as the site administrator",
    status_code=status.HTTP_200_OK,
    response_model=LoginResponse,
)
async def login(payload: LoginRequest, credentials: CredentialManagerDep) -> LoginResponse:
    """Check the admin username and password.

    Unknown usernames and wrong passwords produce the same response.
    """
    try:
        user = credentials.authenticate(payload.username, payload.password)
    except AuthError as err:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=err.message,
        ) from err

    return LoginResponse(
        message="Login successful",
        access_token=create_access_token(user.username),
        token_type="bearer",
    )


@router.put(
    "/profile",
    summary="Change the admin username and/or password",
    response_model=ProfileUpdateResponse,
)
async def update_profile(
    payload: ProfileUpdateRequest,
    credentials: CredentialManagerDep,
) -> ProfileUpdateResponse:
    """Re-verify the current credentials, then apply the requested changes."""
    change = ProfileChange(
        current_username=payload.current_username,
        current_password=payload.current_password,
        new_username=payload.new_username,
        new_password=payload.new_password,
        confirm_password=payload.confirm_password,
    )
    try:
        username = credentials.update_profile(change)
    except NotFoundError as err:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=err.message,
        ) from err
    except (AuthError, ValidationError) as err:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=err.message,
        ) from err

    return ProfileUpdateResponse(message="Profile updated successfully", username=username)
