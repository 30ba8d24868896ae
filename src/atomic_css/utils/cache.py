"""Caching utilities for hashing and value formatting."""

import threading
from typing import Any, Dict, Optional, Generic, TypeVar, Callable, cast
from collections import OrderedDict
from functools import wraps
from hashlib import md5

K = TypeVar("K")
V = TypeVar("V")
R = TypeVar("R")
F = TypeVar("F", bound=Callable[..., Any])


class LRUCache(Generic[K, V]):
    """Thread-safe LRU (Least Recently Used) cache implementation."""

    def __init__(self, max_size: int = 128):
        """
        Initialize LRU cache.

        Args:
            max_size: Maximum number of items to store
        """
        self.max_size = max_size
        self.hits = 0
        self.misses = 0
        self._cache: "OrderedDict[K, V]" = OrderedDict()
        self._lock = threading.RLock()

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Get value from cache."""
        with self._lock:
            if key not in self._cache:
                self.misses += 1
                return default

            self.hits += 1
            self._cache.move_to_end(key)
            return self._cache[key]

    def put(self, key: K, value: V) -> None:
        """Put value in cache."""
        with self._lock:
            self._cache[key] = value
            self._cache.move_to_end(key)

            while len(self._cache) > self.max_size:
                self._cache.popitem(last=False)

    def resize(self, max_size: int) -> None:
        """Change capacity, evicting least recently used items if needed."""
        with self._lock:
            self.max_size = max_size
            while len(self._cache) > self.max_size:
                self._cache.popitem(last=False)

    def clear(self) -> None:
        """Clear all items and statistics."""
        with self._lock:
            self._cache.clear()
            self.hits = 0
            self.misses = 0

    def size(self) -> int:
        """Get current cache size."""
        with self._lock:
            return len(self._cache)


def cache_key(*args: Any, **kwargs: Any) -> str:
    """Generate a cache key from function arguments."""
    key_parts = [repr(arg) for arg in args]

    # Keyword arguments sorted for consistency
    for k, v in sorted(kwargs.items()):
        key_parts.append(f"{k}={repr(v)}")

    key_string = "|".join(key_parts)
    return md5(key_string.encode()).hexdigest()


class CachedFunctionWrapper(Generic[R]):
    """Wrapper for cached functions with cache management methods."""

    def __init__(
        self,
        func: Callable[..., R],
        cache: LRUCache[str, Any],
        key_func: Optional[Callable[..., str]] = None,
    ):
        self._func = func
        self.cache: LRUCache[str, Any] = cache
        self._key_func = key_func
        self.cache_clear = cache.clear
        self.cache_info = lambda: {
            "size": cache.size(),
            "max_size": cache.max_size,
            "hits": cache.hits,
            "misses": cache.misses,
        }
        wraps(func)(self)

    def __call__(self, *args: Any, **kwargs: Any) -> R:
        if self._key_func:
            key = self._key_func(*args, **kwargs)
        else:
            key = cache_key(*args, **kwargs)

        cached_result = self.cache.get(key)
        if cached_result is not None:
            return cast(R, cached_result)

        result = self._func(*args, **kwargs)
        self.cache.put(key, result)
        return result


def cached(
    cache: LRUCache[str, Any], key_func: Optional[Callable[..., str]] = None
) -> Callable[[F], F]:
    """
    Decorator to cache function results.

    Args:
        cache: LRUCache instance to use
        key_func: Function to generate cache key (default: use cache_key)
    """

    def decorator(func: F) -> F:
        wrapper = CachedFunctionWrapper(func, cache, key_func)
        return cast(F, wrapper)

    return decorator


class CacheManager:
    """Manages multiple caches for different purposes."""

    def __init__(self) -> None:
        self._caches: Dict[str, LRUCache] = {}

    def create_cache(self, name: str, max_size: int = 128) -> LRUCache:
        """Create a new named cache."""
        cache: LRUCache[Any, Any] = LRUCache(max_size=max_size)
        self._caches[name] = cache
        return cache

    def get_cache(self, name: str) -> Optional[LRUCache]:
        """Get a cache by name."""
        return self._caches.get(name)

    def resize_all(self, max_size: int) -> None:
        """Apply a new capacity to every cache."""
        for cache in self._caches.values():
            cache.resize(max_size)

    def clear_all(self) -> None:
        """Clear all caches."""
        for cache in self._caches.values():
            cache.clear()

    def get_stats(self) -> Dict[str, Dict[str, Any]]:
        """Get statistics for all caches."""
        stats = {}
        for name, cache in self._caches.items():
            stats[name] = {
                "size": cache.size(),
                "max_size": cache.max_size,
                "hits": cache.hits,
                "misses": cache.misses,
            }
        return stats


# Global cache manager instance
cache_manager = CacheManager()

hash_cache = cache_manager.create_cache("hashes", max_size=1024)
