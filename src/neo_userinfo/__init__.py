"""
neo-userinfo: directory-backed user profile resolution.

Maps identity-directory entries to OpenID Connect style user profiles and
caches lookups in a bounded, sliding-expiration, single-flight cache.
"""

from .__version__ import __version__
from .cache import ExpiringLRUCache
from .config import CACHE_MAX_ENTRIES, LoggingConfig, UserInfoSettings, get_settings, setup_logging
from .core import (
    DirectoryFailure,
    LookupResult,
    LookupStatus,
    NeoUserInfoError,
    RawAttributeSet,
    UserInfoRepositoryProtocol,
    UserProfile,
    UserSearchProtocol,
)
from .mapping import map_attributes
from .repositories import DirectoryUserInfoRepository, create_directory_userinfo_repository

__all__ = [
    "__version__",
    # Core
    "UserProfile",
    "LookupResult",
    "LookupStatus",
    "RawAttributeSet",
    "UserSearchProtocol",
    "UserInfoRepositoryProtocol",
    "NeoUserInfoError",
    "DirectoryFailure",
    # Mapping
    "map_attributes",
    # Cache
    "ExpiringLRUCache",
    # Repository
    "DirectoryUserInfoRepository",
    "create_directory_userinfo_repository",
    # Configuration
    "CACHE_MAX_ENTRIES",
    "UserInfoSettings",
    "get_settings",
    "LoggingConfig",
    "setup_logging",
]
