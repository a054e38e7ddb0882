"""
Directory Attribute Mapper for neo-userinfo

Maps the raw attributes of a directory entry into a UserProfile. This is where
directory attribute names (uid, mail, sn, ...) are translated to profile
claims.
"""
from typing import Any, Dict, Optional, Tuple

from ..core.entities import UserProfile
from ..core.protocols import RawAttributeSet

# Identity attributes in precedence order, first present one wins
IDENTITY_ATTRIBUTES: Tuple[str, ...] = ("uid", "sAMAccountName", "cn")

# Optional attribute -> profile field
OPTIONAL_ATTRIBUTES: Dict[str, str] = {
    "mail": "email",
    "telephoneNumber": "phone_number",
    "displayName": "name",
    "givenName": "given_name",
    "sn": "family_name",
    "initials": "middle_name",
    "labeledURI": "profile",
    "organizationName": "website",
}


def get_attribute(attrs: RawAttributeSet, name: str) -> Optional[str]:
    """Read a single attribute value.

    Multi-valued attributes yield their first value. A missing attribute,
    None or an empty value list are all treated as unset; an empty string is
    a set value.
    """
    value: Any = attrs.get(name)
    if isinstance(value, (list, tuple)):
        if not value:
            return None
        value = value[0]
    if value is None:
        return None
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)


def resolve_identity(attrs: RawAttributeSet) -> Optional[str]:
    """Return the value of the first identity attribute present, if any."""
    for name in IDENTITY_ATTRIBUTES:
        value = get_attribute(attrs, name)
        if value is not None:
            return value
    return None


def map_attributes(attrs: RawAttributeSet) -> Optional[UserProfile]:
    """
    Map directory attributes to a user profile.

    Args:
        attrs: Attributes of one directory entry

    Returns:
        UserProfile, or None when no identity attribute is present
    """
    identity = resolve_identity(attrs)
    if identity is None:
        return None

    # the identity value is used for both the subject and the username
    values: Dict[str, Any] = {"sub": identity, "preferred_username": identity}

    for attribute, field_name in OPTIONAL_ATTRIBUTES.items():
        value = get_attribute(attrs, attribute)
        if value is not None:
            values[field_name] = value

    # directory-sourced contact details are never asserted as verified
    if "email" in values:
        values["email_verified"] = False
    if "phone_number" in values:
        values["phone_number_verified"] = False

    return UserProfile(**values)


__all__ = [
    "IDENTITY_ATTRIBUTES",
    "OPTIONAL_ATTRIBUTES",
    "get_attribute",
    "resolve_identity",
    "map_attributes",
]
