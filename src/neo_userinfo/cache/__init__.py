"""Process-local lookup cache."""

from .cache_entry import CacheEntry
from .memory_cache import ExpiringLRUCache, create_expiring_lru_cache

__all__ = [
    "CacheEntry",
    "ExpiringLRUCache",
    "create_expiring_lru_cache",
]
