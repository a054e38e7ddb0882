"""Protocol contracts for neo-userinfo."""

from .user_search import RawAttributeSet, UserSearchProtocol
from .userinfo_repository import UserInfoRepositoryProtocol

__all__ = [
    "RawAttributeSet",
    "UserSearchProtocol",
    "UserInfoRepositoryProtocol",
]
