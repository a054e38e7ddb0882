"""User info repository protocol contract."""

from typing import Optional, Protocol, runtime_checkable

from ..entities.user_profile import UserProfile


@runtime_checkable
class UserInfoRepositoryProtocol(Protocol):
    """Protocol exposed to the embedding identity provider.

    Both operations return None for every outcome other than a resolved
    profile. No exception crosses this contract.
    """

    def get_by_username(self, username: Optional[str]) -> Optional[UserProfile]:
        """Get the profile for a directory username."""
        ...

    def get_by_email_address(self, email: Optional[str]) -> Optional[UserProfile]:
        """Get the profile for an email address in the configured domain."""
        ...
