"""Lookup result value object."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..entities.user_profile import UserProfile
from ..exceptions.directory_failure import DirectoryFailure


class LookupStatus(Enum):
    """Outcome of a user lookup."""
    FOUND = "found"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class LookupResult:
    """Tagged result of resolving a username or email address.

    FOUND and NOT_FOUND are normal outcomes and may be cached. FAILED means the
    directory could not be queried; it carries the failure and is never cached.
    """

    status: LookupStatus
    profile: Optional[UserProfile] = None
    error: Optional[DirectoryFailure] = None
    reason: Optional[str] = None

    def __post_init__(self) -> None:
        if self.status is LookupStatus.FOUND and self.profile is None:
            raise ValueError("FOUND result requires a profile")
        if self.status is not LookupStatus.FOUND and self.profile is not None:
            raise ValueError(f"{self.status.value} result cannot carry a profile")
        if self.status is LookupStatus.FAILED and self.error is None:
            raise ValueError("FAILED result requires an error")

    @classmethod
    def found(cls, profile: UserProfile) -> "LookupResult":
        return cls(status=LookupStatus.FOUND, profile=profile)

    @classmethod
    def not_found(cls, reason: Optional[str] = None) -> "LookupResult":
        return cls(status=LookupStatus.NOT_FOUND, reason=reason)

    @classmethod
    def failed(cls, error: DirectoryFailure) -> "LookupResult":
        return cls(status=LookupStatus.FAILED, error=error, reason=error.message)

    @property
    def is_found(self) -> bool:
        return self.status is LookupStatus.FOUND

    @property
    def is_failed(self) -> bool:
        return self.status is LookupStatus.FAILED

    @property
    def is_cacheable(self) -> bool:
        """Whether this outcome may be stored in the lookup cache."""
        return self.status is not LookupStatus.FAILED

    def __str__(self) -> str:
        if self.is_found:
            return f"found({self.profile.preferred_username})"
        if self.reason:
            return f"{self.status.value}({self.reason})"
        return self.status.value
