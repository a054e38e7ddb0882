"""Directory attribute mapping."""

from .attribute_mapper import (
    IDENTITY_ATTRIBUTES,
    OPTIONAL_ATTRIBUTES,
    get_attribute,
    map_attributes,
    resolve_identity,
)

__all__ = [
    "IDENTITY_ATTRIBUTES",
    "OPTIONAL_ATTRIBUTES",
    "get_attribute",
    "map_attributes",
    "resolve_identity",
]
