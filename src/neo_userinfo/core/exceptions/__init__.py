"""Exception hierarchy for neo-userinfo."""

from .base import NeoUserInfoError, create_error_details
from .directory_failure import DirectoryFailure

__all__ = [
    "NeoUserInfoError",
    "DirectoryFailure",
    "create_error_details",
]
