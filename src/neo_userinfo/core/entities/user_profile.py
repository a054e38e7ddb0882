"""User profile domain entity."""

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class UserProfile:
    """Canonical user profile resolved from a directory record.

    Handles ONLY the normalized profile representation. Field names follow the
    OpenID Connect standard claims so the profile can be served as userinfo
    without renaming.

    ``sub`` and ``preferred_username`` always come from the same directory
    attribute. Verified flags are ``None`` when the matching contact field is
    unset.
    """

    # Core Identity
    sub: str
    preferred_username: str

    # Contact Information
    email: Optional[str] = None
    email_verified: Optional[bool] = None
    phone_number: Optional[str] = None
    phone_number_verified: Optional[bool] = None

    # Name Structure
    name: Optional[str] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    middle_name: Optional[str] = None

    # Links
    profile: Optional[str] = None
    website: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.sub, str) or not isinstance(self.preferred_username, str):
            raise TypeError("sub and preferred_username must be strings")

    @property
    def has_email(self) -> bool:
        return self.email is not None

    @property
    def has_phone_number(self) -> bool:
        return self.phone_number is not None

    def to_claims(self) -> Dict[str, Any]:
        """Convert to an OpenID Connect userinfo claim dictionary.

        Unset claims are omitted rather than emitted as null.
        """
        claims: Dict[str, Any] = {}
        for field in fields(self):
            value = getattr(self, field.name)
            if value is not None:
                claims[field.name] = value
        return claims
