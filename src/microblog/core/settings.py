"""Application settings and configuration.

This module defines all configuration options for the Microblog application.
Settings are loaded from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Process-level configuration only. Site-level settings that the admin edits
    at runtime (name, tagline, post visibility) live in the database and are
    served by :mod:`microblog.services.site_settings`.
    """

    # Application metadata
    app_name: str = Field(default="Microblog API", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")

    # Security and authentication
    secret_key: str = Field(alias="SECRET_KEY")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Database configuration
    database_url: str = Field(default="sqlite:///./microblog.db", alias="DATABASE_URL")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")
    init_db_on_startup: bool = Field(default=True, alias="INIT_DB_ON_STARTUP")

    # HTTP surface
    api_prefix: str = Field(default="/api", alias="API_PREFIX")

    # Seeded admin identity
    admin_username: str = Field(default="admin", alias="ADMIN_USERNAME")
    admin_password: str = Field(default="password", alias="ADMIN_PASSWORD")
    bcrypt_rounds: int = Field(default=12, ge=4, le=31, alias="BCRYPT_ROUNDS")
    min_password_length: int = Field(default=6, ge=1, alias="MIN_PASSWORD_LENGTH")

    # Admin claim handling
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(
        default=60 * 24,
        alias="ACCESS_TOKEN_EXPIRE_MINUTES",
    )
    legacy_admin_claim: bool = Field(default=True, alias="LEGACY_ADMIN_CLAIM")
    enforce_admin_writes: bool = Field(default=False, alias="ENFORCE_ADMIN_WRITES")

    # Post limits (None disables the server-side cap)
    post_max_length: int | None = Field(default=None, ge=1, alias="POST_MAX_LENGTH")

    # CORS configuration for web frontend access
    cors_origins: list[str] = Field(
        default=["*"],
        alias="CORS_ORIGINS",
    )
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(
        default=["*"],
        alias="CORS_ALLOW_HEADERS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )


settings = Settings()  # type: ignore[call-arg]
