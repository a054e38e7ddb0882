"""Core domain layer: entities, value objects, protocols and exceptions."""

from .entities import UserProfile
from .exceptions import DirectoryFailure, NeoUserInfoError
from .protocols import RawAttributeSet, UserInfoRepositoryProtocol, UserSearchProtocol
from .value_objects import LookupResult, LookupStatus

__all__ = [
    "UserProfile",
    "LookupResult",
    "LookupStatus",
    "RawAttributeSet",
    "UserSearchProtocol",
    "UserInfoRepositoryProtocol",
    "NeoUserInfoError",
    "DirectoryFailure",
]
