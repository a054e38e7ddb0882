"""Value objects for neo-userinfo."""

from .lookup_result import LookupResult, LookupStatus

__all__ = ["LookupResult", "LookupStatus"]
