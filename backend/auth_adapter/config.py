"""
Adapter configuration loaded from environment variables and constructor options.
"""
import logging
from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

from auth_adapter.models.user import UserRole


class Settings(BaseSettings):
    """Adapter settings from environment variables."""

    # MongoDB
    mongo_uri: str = "mongodb://mongodb:27017"
    mongo_db_name: str = "auth_db"

    # Avatar mirroring
    avatar_bucket_name: str = "avatars"
    avatar_fetch_timeout_seconds: float = 30.0

    # Feature flags (see AdapterOptions)
    store_image: bool = False
    role_based: bool = False

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


class AdapterOptions(BaseModel):
    """
    Feature flags recognised by the adapter, resolved once at construction.

    Accepts both the snake_case attribute names and the camelCase names used
    by the authentication framework (``storeImage``, ``roleBased``).
    Unknown options are rejected.
    """
    store_image: bool = Field(
        default=False,
        alias="storeImage",
        description="Mirror the user's image URL into the avatars bucket on creation",
    )
    role_based: bool = Field(
        default=False,
        alias="roleBased",
        description="Assign default_roles to every newly created user",
    )
    default_roles: list[str] = Field(
        default=[UserRole.USER.value],
        alias="defaultRoles",
        description="Roles given to new users when role_based is enabled",
    )

    class Config:
        populate_by_name = True
        extra = "forbid"
        frozen = True

    @classmethod
    def from_settings(cls, settings: Settings) -> "AdapterOptions":
        """Build options from the environment-backed settings."""
        return cls(store_image=settings.store_image, role_based=settings.role_based)


def configure_logging(settings: Settings | None = None) -> None:
    """
    Configure root logging for processes embedding the adapter.

    The adapter itself only emits through named loggers; call this from the
    host process if it has no logging setup of its own.
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
