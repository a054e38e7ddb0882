"""Cache entry entity.

A cached value with access tracking for sliding expiration.
"""

from dataclasses import dataclass
from typing import Any, Hashable


@dataclass
class CacheEntry:
    """Cache entry with sliding expiration.

    Timestamps are readings of the owning cache's clock (seconds, monotonic
    by default), not wall-clock datetimes.
    """

    key: Hashable
    value: Any
    created_at: float
    accessed_at: float
    access_count: int = 0

    def is_expired(self, now: float, expire_after_access: float) -> bool:
        """Check if the entry went unaccessed for longer than the window."""
        return now - self.accessed_at >= expire_after_access

    def touch(self, now: float) -> None:
        """Update access timestamp and increment access count."""
        self.accessed_at = now
        self.access_count += 1

    def time_until_expiry(self, now: float, expire_after_access: float) -> float:
        """Get seconds until the entry expires if left unaccessed."""
        return max(0.0, self.accessed_at + expire_after_access - now)
