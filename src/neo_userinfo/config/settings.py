"""
User info settings for neo-userinfo.

Values are read once at construction (environment, then .env) and are
immutable afterwards. Reconfiguring means building a new repository with a
new settings instance.
"""
from datetime import timedelta
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Upper bound on cached lookups, not configurable
CACHE_MAX_ENTRIES = 100

DEFAULT_EMAIL_SUFFIX = "@example.com"
DEFAULT_CACHE_EXPIRE_AFTER_ACCESS = timedelta(days=14)


class UserInfoSettings(BaseSettings):
    """Configuration for directory-backed user info lookups."""

    model_config = SettingsConfigDict(
        env_prefix="USERINFO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    email_suffix: str = Field(
        default=DEFAULT_EMAIL_SUFFIX,
        description="Suffix stripped from email addresses to derive a username",
    )
    cache_expire_after_access: timedelta = Field(
        default=DEFAULT_CACHE_EXPIRE_AFTER_ACCESS,
        description="Sliding expiration window for cached lookups",
    )

    @field_validator("cache_expire_after_access")
    @classmethod
    def validate_expire_after_access(cls, v: timedelta) -> timedelta:
        if v <= timedelta(0):
            raise ValueError("cache_expire_after_access must be positive")
        return v

    @property
    def cache_max_entries(self) -> int:
        return CACHE_MAX_ENTRIES


@lru_cache()
def get_settings() -> UserInfoSettings:
    """Get cached settings instance."""
    return UserInfoSettings()
