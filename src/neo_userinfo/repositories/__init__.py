"""User info repositories."""

from .directory_userinfo_repository import (
    DirectoryUserInfoRepository,
    SearchFunction,
    create_directory_userinfo_repository,
)

__all__ = [
    "DirectoryUserInfoRepository",
    "SearchFunction",
    "create_directory_userinfo_repository",
]
