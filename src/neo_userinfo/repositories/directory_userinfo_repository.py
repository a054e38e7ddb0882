"""
Directory User Info Repository for neo-userinfo

Resolves usernames and email addresses to user profiles through a directory
search, keeping results (negative ones included) in a bounded expiring cache
so repeated lookups do not reach the directory.
"""
import logging
from typing import Any, Callable, Dict, Optional, Union

from ..cache import ExpiringLRUCache
from ..config import UserInfoSettings, get_settings
from ..core import (
    DirectoryFailure,
    LookupResult,
    RawAttributeSet,
    UserProfile,
    UserSearchProtocol,
)
from ..core.exceptions import create_error_details
from ..mapping import map_attributes

logger = logging.getLogger(__name__)

SearchFunction = Callable[[str], Optional[RawAttributeSet]]


class DirectoryUserInfoRepository:
    """
    Directory-backed implementation of UserInfoRepositoryProtocol.

    Lookups by username go through an ExpiringLRUCache keyed by the username
    exactly as given. On a miss the directory is searched once, however many
    threads ask for the same username at the same time, and the mapped result
    is stored. "Not found" is stored too, including entries that cannot be
    mapped; directory failures are not.

    Lookups by email only apply to addresses ending in the configured suffix;
    the suffix is stripped and the remainder used as the username.
    """

    def __init__(
        self,
        user_search: Union[UserSearchProtocol, SearchFunction],
        settings: Optional[UserInfoSettings] = None,
        clock: Optional[Callable[[], float]] = None,
    ):
        """
        Initialize directory user info repository.

        Args:
            user_search: Directory search collaborator, or a plain search callable.
                An object with a callable search_for_user is always used
                through that method, even if it is callable itself.
            settings: Optional settings, defaults to environment settings
            clock: Optional time source for the cache, in seconds
        """
        search_method = getattr(user_search, "search_for_user", None)
        if callable(search_method):
            self._search_for_user: SearchFunction = search_method
        elif callable(user_search):
            self._search_for_user = user_search
        else:
            raise TypeError("user_search must implement search_for_user or be callable")

        self.settings = settings or get_settings()
        self._cache = ExpiringLRUCache(
            max_entries=self.settings.cache_max_entries,
            expire_after_access=self.settings.cache_expire_after_access,
            clock=clock,
        )

        logger.info(
            f"Initialized DirectoryUserInfoRepository with email suffix: "
            f"'{self.settings.email_suffix}', max entries: {self._cache.max_entries}, "
            f"expire after access: {self.settings.cache_expire_after_access}"
        )

    @property
    def email_suffix(self) -> str:
        return self.settings.email_suffix

    def lookup_by_username(self, username: Optional[str]) -> LookupResult:
        """
        Resolve a username to a lookup result.

        Args:
            username: Directory username, used verbatim as the cache key

        Returns:
            FOUND or NOT_FOUND (possibly from cache), or FAILED when the
            directory could not be searched
        """
        if username is None:
            return LookupResult.not_found(reason="no username given")

        try:
            return self._cache.get_or_load(username, self._load_user)
        except DirectoryFailure as e:
            logger.warning(
                f"User lookup failed for '{username}', not caching: {e}",
                extra=create_error_details(e),
            )
            return LookupResult.failed(e)

    def lookup_by_email(self, email: Optional[str]) -> LookupResult:
        """
        Resolve an email address to a lookup result.

        Strips the configured suffix and delegates to lookup_by_username.
        Matching is an exact, case-sensitive suffix comparison.

        Args:
            email: Email address

        Returns:
            NOT_FOUND without a directory search when the address is empty or
            outside the configured domain, otherwise the username lookup result
        """
        if not email:
            logger.debug("Email lookup rejected: no email address given")
            return LookupResult.not_found(reason="no email address given")

        suffix = self.email_suffix
        if not email.endswith(suffix):
            logger.debug(f"Email lookup rejected: '{email}' does not end with '{suffix}'")
            return LookupResult.not_found(reason=f"email address outside '{suffix}'")

        username = email[:len(email) - len(suffix)]
        return self.lookup_by_username(username)

    def get_by_username(self, username: Optional[str]) -> Optional[UserProfile]:
        """Get the profile for a username, or None."""
        return self.lookup_by_username(username).profile

    def get_by_email_address(self, email: Optional[str]) -> Optional[UserProfile]:
        """Get the profile for an email address, or None."""
        return self.lookup_by_email(email).profile

    def get_cache_stats(self) -> Dict[str, Any]:
        """
        Get statistics for the lookup cache.

        Returns:
            Dictionary with hit/miss/load/eviction counters and limits
        """
        return self._cache.get_stats()

    def _load_user(self, username: str) -> LookupResult:
        """Search the directory and map the entry. Runs once per cache miss."""
        try:
            attributes = self._search_for_user(username)
        except Exception as e:
            raise DirectoryFailure.search_failed(username, e) from e

        if attributes is None:
            logger.info(f"No directory entry for user: {username}")
            return LookupResult.not_found(reason="no directory entry")

        try:
            profile = map_attributes(attributes)
        except Exception as e:
            logger.warning(f"Directory entry for '{username}' could not be mapped: {e}")
            return LookupResult.not_found(reason="unmappable directory entry")

        if profile is None:
            logger.info(f"Directory entry for '{username}' has no identity attribute")
            return LookupResult.not_found(reason="no identity attribute")

        logger.debug(f"Resolved user '{username}' to subject: {profile.sub}")
        return LookupResult.found(profile)


# Factory function for dependency injection
def create_directory_userinfo_repository(
    user_search: Union[UserSearchProtocol, SearchFunction],
    settings: Optional[UserInfoSettings] = None,
) -> DirectoryUserInfoRepository:
    """
    Create a directory user info repository instance.

    Args:
        user_search: Directory search collaborator or callable
        settings: Optional settings

    Returns:
        Configured DirectoryUserInfoRepository instance
    """
    return DirectoryUserInfoRepository(user_search=user_search, settings=settings)


__all__ = [
    "DirectoryUserInfoRepository",
    "SearchFunction",
    "create_directory_userinfo_repository",
]
