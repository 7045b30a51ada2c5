"""
Core configuration module for the Profile API.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application settings
    app_env: Literal["dev", "test", "prod"] = "dev"
    debug: bool = False
    app_name: str = "Profile API"
    app_version: str = "1.0.0"
    api_prefix: str = Field(
        default="/api/v1",
        description="API prefix for the application"
    )

    # Database settings
    database_url: str = Field(
        default="sqlite+aiosqlite:///./profile_api.db",
        description="SQLAlchemy async database URL (sqlite+aiosqlite or mysql+aiomysql)"
    )
    auto_create_tables: bool = Field(
        default=True,
        description="Create missing tables on startup (disable when migrations are managed by Alembic)"
    )

    # JWT settings
    jwt_secret: str = Field(default="change-me-in-production", description="JWT secret key")
    jwt_alg: str = Field(default="HS256", description="JWT algorithm")
    access_token_expires_min: int = Field(
        default=60, description="Access token expiration in minutes"
    )
    auth_cookie_name: str = Field(default="token", description="Cookie carrying the access token")
    cookie_secure: bool = Field(default=False, description="Send the auth cookie over HTTPS only")

    # CORS settings
    cors_origins: str = Field(
        default="http://localhost:3000",
        description="Comma-separated list of allowed CORS origins"
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    # Image storage settings
    image_store: Literal["local", "gcs"] = Field(
        default="local",
        description="Image storage backend"
    )
    image_local_path: str = Field(
        default="./images",
        description="Directory used by the local image store"
    )
    gcs_bucket_name: str = Field(
        default="profile_api_images",
        description="Google Cloud Storage bucket name for images"
    )
    gcp_project_id: str = Field(
        default="",
        description="Google Cloud Platform project ID"
    )

    # File upload settings
    upload_max_size_mb: int = Field(
        default=10, description="Maximum file upload size in MB"
    )

    # Journal settings
    journal_strict_status: bool = Field(
        default=False,
        description="Reject journal statuses outside pending/processing/public"
    )

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "dev"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "prod"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.app_env == "test"


# Global settings instance
settings = Settings()
