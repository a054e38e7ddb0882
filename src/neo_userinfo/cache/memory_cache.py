"""Expiring LRU cache.

Thread-safe, process-local keyed store combining a maximum entry count
(least-recently-used eviction) with a sliding expire-after-access window,
plus single-flight loading of missing keys.
"""

import logging
import threading
import time
from collections import OrderedDict
from concurrent.futures import Future
from datetime import timedelta
from typing import Any, Callable, Dict, Hashable, Optional, Union

from .cache_entry import CacheEntry

logger = logging.getLogger(__name__)

Clock = Callable[[], float]
Loader = Callable[[Any], Any]


class ExpiringLRUCache:
    """Bounded in-memory cache with sliding expiration and load coalescing.

    Features:
    - Maximum entry count with LRU eviction
    - Expiration after a period without access, reset on every read or write
    - At most one in-flight load per key; concurrent callers share its result
    - Failed loads are not stored
    - Hit/miss/load/eviction statistics
    """

    def __init__(
        self,
        max_entries: int,
        expire_after_access: Union[timedelta, float],
        clock: Optional[Clock] = None,
    ):
        """Initialize expiring LRU cache.

        Args:
            max_entries: Maximum number of entries before eviction
            expire_after_access: Sliding expiration window, timedelta or seconds
            clock: Time source in seconds, defaults to time.monotonic
        """
        if isinstance(expire_after_access, timedelta):
            expire_after_access = expire_after_access.total_seconds()
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        if expire_after_access <= 0:
            raise ValueError("expire_after_access must be positive")

        self._max_entries = max_entries
        self._expire_after_access = float(expire_after_access)
        self._clock = clock or time.monotonic

        # Access order: least recently used first
        self._cache: "OrderedDict[Hashable, CacheEntry]" = OrderedDict()
        self._pending: Dict[Hashable, Future] = {}
        self._lock = threading.Lock()
        self._stats = {
            "hits": 0,
            "misses": 0,
            "loads": 0,
            "load_failures": 0,
            "evictions": 0,
            "expired_cleanups": 0,
        }

    @property
    def max_entries(self) -> int:
        return self._max_entries

    @property
    def expire_after_access(self) -> float:
        return self._expire_after_access

    def get_or_load(self, key: Hashable, loader: Loader) -> Any:
        """Get the cached value for key, loading it on a miss.

        Only one caller runs ``loader`` for a given key at a time; other callers
        for that key block until it finishes and receive the same value, or the
        same exception. The loader runs without holding the cache lock.

        Args:
            key: Cache key
            loader: Called with the key on a miss; its return value is stored

        Returns:
            The cached or freshly loaded value

        Raises:
            BaseException: Whatever the loader raised, interrupts included;
                nothing is stored and the key is free to load again
        """
        with self._lock:
            entry = self._get_live_entry(key)
            if entry is not None:
                self._stats["hits"] += 1
                return entry.value

            self._stats["misses"] += 1
            pending = self._pending.get(key)
            if pending is None:
                pending = Future()
                self._pending[key] = pending
                is_loader = True
            else:
                is_loader = False

        if not is_loader:
            logger.debug(f"Waiting on in-flight load for key: {key}")
            return pending.result()

        logger.debug(f"Cache miss, loading key: {key}")
        try:
            value = loader(key)
        except BaseException as e:
            with self._lock:
                self._pending.pop(key, None)
                self._stats["load_failures"] += 1
            pending.set_exception(e)
            raise

        with self._lock:
            self._store(key, value)
            self._pending.pop(key, None)
            self._stats["loads"] += 1
        pending.set_result(value)
        return value

    def get_if_present(self, key: Hashable, default: Any = None) -> Optional[Any]:
        """Get the cached value without loading, touching it if present.

        Returns ``default`` on a miss. A stored value of None is returned as
        None, so pass a sentinel default when None may be cached.
        """
        with self._lock:
            entry = self._get_live_entry(key)
            if entry is None:
                self._stats["misses"] += 1
                return default
            self._stats["hits"] += 1
            return entry.value

    def cleanup_expired(self) -> int:
        """Remove all expired entries."""
        with self._lock:
            return self._cleanup_expired()

    def size(self) -> int:
        """Get number of live entries."""
        with self._lock:
            self._cleanup_expired()
            return len(self._cache)

    def __len__(self) -> int:
        return self.size()

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        with self._lock:
            self._cleanup_expired()

            total_requests = self._stats["hits"] + self._stats["misses"]
            hit_rate = (self._stats["hits"] / total_requests * 100) if total_requests > 0 else 0.0

            return {
                **self._stats,
                "total_keys": len(self._cache),
                "pending_loads": len(self._pending),
                "hit_rate_percent": hit_rate,
                "total_requests": total_requests,
                "max_entries": self._max_entries,
                "expire_after_access_seconds": self._expire_after_access,
                "eviction_policy": "lru",
            }

    def _get_live_entry(self, key: Hashable) -> Optional[CacheEntry]:
        """Return the entry for key if not expired, refreshing it. Lock held."""
        entry = self._cache.get(key)
        if entry is None:
            return None

        now = self._clock()
        if entry.is_expired(now, self._expire_after_access):
            del self._cache[key]
            self._stats["expired_cleanups"] += 1
            return None

        entry.touch(now)
        self._cache.move_to_end(key)
        return entry

    def _store(self, key: Hashable, value: Any) -> None:
        """Insert or replace an entry, then enforce capacity. Lock held."""
        now = self._clock()
        self._cache.pop(key, None)
        self._cache[key] = CacheEntry(key=key, value=value, created_at=now, accessed_at=now)

        self._cleanup_expired()
        while len(self._cache) > self._max_entries:
            evicted_key, _ = self._cache.popitem(last=False)
            self._stats["evictions"] += 1
            logger.debug(f"Evicted least recently used key: {evicted_key}")

    def _cleanup_expired(self) -> int:
        """Remove expired entries. Lock held."""
        now = self._clock()
        expired_keys = [
            key for key, entry in self._cache.items()
            if entry.is_expired(now, self._expire_after_access)
        ]

        for key in expired_keys:
            del self._cache[key]

        if expired_keys:
            self._stats["expired_cleanups"] += len(expired_keys)

        return len(expired_keys)


# Factory function for dependency injection
def create_expiring_lru_cache(
    max_entries: int,
    expire_after_access: Union[timedelta, float],
    clock: Optional[Clock] = None,
) -> ExpiringLRUCache:
    """Create expiring LRU cache with configuration.

    Args:
        max_entries: Maximum number of entries before eviction
        expire_after_access: Sliding expiration window
        clock: Optional time source in seconds

    Returns:
        Configured expiring LRU cache
    """
    return ExpiringLRUCache(
        max_entries=max_entries,
        expire_after_access=expire_after_access,
        clock=clock,
    )
