"""Domain entities for neo-userinfo."""

from .user_profile import UserProfile

__all__ = ["UserProfile"]
