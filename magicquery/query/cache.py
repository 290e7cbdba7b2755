"""
Process-wide caches for compiled regex patterns and path accessors.

Both caches are keyed by literal strings and bounded with LRU eviction,
so callers that generate many distinct paths or patterns cannot grow
memory without limit. Inserts are guarded by a lock; two threads
compiling the same key at once is harmless (last write wins).
"""

from __future__ import annotations

import re
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Dict, Hashable, Optional

from ..core.exceptions import InvalidPatternError
from ..utils.logging import get_logger


logger = get_logger(__name__)

DEFAULT_PATH_CACHE_SIZE = 1024
DEFAULT_REGEX_CACHE_SIZE = 256


@dataclass
class CacheStats:
    """Hit/miss counters for a cache."""
    hits: int = 0
    misses: int = 0
    evictions: int = 0
    
    def to_dict(self) -> Dict[str, int]:
        return {
            "hits": self.hits,
            "misses": self.misses,
            "evictions": self.evictions,
        }


class LRUCache:
    """
    Thread-safe LRU mapping from a hashable key to a compiled value.
    
    Args:
        name: Name used in log messages
        max_size: Maximum number of entries (0 = unbounded)
    """
    
    def __init__(self, name: str, max_size: int = 0):
        if max_size < 0:
            raise ValueError(f"max_size must be >= 0, got {max_size}")
        self.name = name
        self._max_size = max_size
        self._data: "OrderedDict[Hashable, Any]" = OrderedDict()
        self._lock = threading.RLock()
        self.stats = CacheStats()
    
    @property
    def max_size(self) -> int:
        return self._max_size
    
    def resize(self, max_size: int) -> None:
        """Change the bound, evicting least recently used entries if needed."""
        if max_size < 0:
            raise ValueError(f"max_size must be >= 0, got {max_size}")
        with self._lock:
            self._max_size = max_size
            self._evict()
    
    def get_or_create(self, key: Hashable, factory: Callable[[], Any]) -> Any:
        """
        Return the cached value for key, creating it with factory on a miss.
        
        The factory runs outside the lock; exceptions it raises propagate
        and nothing is cached.
        """
        with self._lock:
            if key in self._data:
                self._data.move_to_end(key)
                self.stats.hits += 1
                return self._data[key]
            self.stats.misses += 1
        
        value = factory()
        
        with self._lock:
            self._data[key] = value
            self._data.move_to_end(key)
            self._evict()
        return value
    
    def _evict(self) -> None:
        if not self._max_size:
            return
        while len(self._data) > self._max_size:
            key, _ = self._data.popitem(last=False)
            self.stats.evictions += 1
            logger.debug(f"{self.name} cache evicted {key!r}")
    
    def clear(self) -> None:
        with self._lock:
            self._data.clear()
            self.stats = CacheStats()
    
    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._data
    
    def __len__(self) -> int:
        with self._lock:
            return len(self._data)


class RegexCache(LRUCache):
    """Cache of compiled patterns keyed by (pattern, flags)."""
    
    def __init__(self, max_size: int = DEFAULT_REGEX_CACHE_SIZE):
        super().__init__("regex", max_size)
    
    def compile(self, pattern: str, flags: int = 0) -> re.Pattern:
        """
        Compile a pattern, reusing a cached instance when possible.
        
        Raises:
            InvalidPatternError: If the pattern is not a valid regex
        """
        def factory() -> re.Pattern:
            try:
                return re.compile(pattern, flags)
            except re.error as e:
                logger.warning(f"Rejected regex pattern {pattern!r}: {e}")
                raise InvalidPatternError(pattern, str(e)) from e
        
        return self.get_or_create((pattern, flags), factory)


regex_cache = RegexCache()
path_cache = LRUCache("path", DEFAULT_PATH_CACHE_SIZE)


def get_cached_regex(pattern: str, flags: int = 0) -> re.Pattern:
    """Compile pattern through the process-wide regex cache."""
    return regex_cache.compile(pattern, flags)


def configure_caches(
    path_cache_size: Optional[int] = None,
    regex_cache_size: Optional[int] = None,
) -> None:
    """Resize the process-wide caches."""
    if path_cache_size is not None:
        path_cache.resize(path_cache_size)
    if regex_cache_size is not None:
        regex_cache.resize(regex_cache_size)


def clear_caches() -> None:
    """Drop every cached accessor and pattern."""
    path_cache.clear()
    regex_cache.clear()


def cache_info() -> Dict[str, Dict[str, int]]:
    """Return size and counters for both caches."""
    return {
        cache.name: {"size": len(cache), "max_size": cache.max_size, **cache.stats.to_dict()}
        for cache in (path_cache, regex_cache)
    }
