"""Authentication and profile schemas."""

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Admin login submission."""

    username: str | None = Field(None, description="Admin username")
    password: str | None = Field(None, description="Admin password")


class LoginResponse(BaseModel):
    """Response returned after successful login."""

    message: str = Field(..., description="Outcome message")
    access_token: str = Field(..., description="Signed admin token")
    token_type: str = Field(..., description="Token type (always 'bearer')")


class ProfileUpdateRequest(BaseModel):
    """Credential change request.

    Field names follow the camelCase keys used by the web client.
    """

    current_username: str | None = Field(None, alias="currentUsername")
    new_username: str | None = Field(None, alias="newUsername")
    current_password: str | None = Field(None, alias="currentPassword")
    new_password: str | None = Field(None, alias="newPassword")
    confirm_password: str | None = Field(None, alias="confirmPassword")

    model_config = ConfigDict(populate_by_name=True)


class ProfileUpdateResponse(BaseModel):
    """Outcome of a credential change."""

    message: str
    username: str = Field(..., description="Effective username after the update")
