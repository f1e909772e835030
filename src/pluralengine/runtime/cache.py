"""Thread-safe LRU cache of built PluralRules engines.

The cache is the only shared mutable state of the engine. It guarantees at
most one concurrent build per key: the first caller builds, concurrent
callers for the same key wait on that key's build lock and then receive
the very same engine instance. Callers for other keys are never blocked by
a build. Failed builds are not cached; the next caller retries.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from collections.abc import Callable, Hashable
from threading import Lock, RLock
from typing import TYPE_CHECKING

from .cache_config import CacheConfig

if TYPE_CHECKING:
    from .plural_rules import PluralRules

__all__ = ["EngineCache"]

logger = logging.getLogger(__name__)


class EngineCache:
    """LRU mapping of cache keys to built engines.

    Example:
        >>> cache = EngineCache()
        >>> rules = cache.get_or_build(("en", "cardinal"), build_english_rules)
        >>> cache.get_or_build(("en", "cardinal"), build_english_rules) is rules
        True
    """

    __slots__ = ("_building", "_config", "_engines", "_hits", "_lock", "_misses")

    def __init__(self, config: CacheConfig | None = None) -> None:
        self._config = config or CacheConfig()
        self._engines: OrderedDict[Hashable, PluralRules] = OrderedDict()
        self._building: dict[Hashable, Lock] = {}
        self._lock = RLock()
        self._hits = 0
        self._misses = 0

    @property
    def config(self) -> CacheConfig:
        return self._config

    def get(self, key: Hashable) -> PluralRules | None:
        """Cached engine for key, or None. Marks the entry as recently used."""
        with self._lock:
            engine = self._engines.get(key)
            if engine is not None:
                self._engines.move_to_end(key)
                self._hits += 1
            return engine

    def get_or_build(self, key: Hashable, build: Callable[[], PluralRules]) -> PluralRules:
        """Return the cached engine for key, building it at most once.

        Args:
            key: Hashable cache key
            build: Zero-argument factory; called only on a miss

        Returns:
            The cached or freshly built engine

        Raises:
            Exception: Whatever build() raises; nothing is cached then
        """
        engine = self.get(key)
        if engine is not None:
            return engine

        with self._lock:
            build_lock = self._building.setdefault(key, Lock())

        with build_lock:
            # Another thread may have finished the build while we waited.
            engine = self.get(key)
            if engine is not None:
                return engine

            with self._lock:
                self._misses += 1
            logger.debug("Building plural rules for %r", key)
            try:
                engine = build()
            finally:
                with self._lock:
                    if self._building.get(key) is build_lock:
                        del self._building[key]
                    # Publish inside the build lock so waiters see the engine.
                    if engine is not None:
                        self._store(key, engine)
        return engine

    def _store(self, key: Hashable, engine: PluralRules) -> None:
        self._engines[key] = engine
        self._engines.move_to_end(key)
        while len(self._engines) > self._config.size:
            evicted, _ = self._engines.popitem(last=False)
            logger.debug("Evicted plural rules for %r", evicted)

    def clear(self) -> None:
        """Drop all cached engines and reset statistics."""
        with self._lock:
            self._engines.clear()
            self._hits = 0
            self._misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._engines)

    def cache_info(self) -> dict[str, int | tuple[Hashable, ...]]:
        """Get detailed cache statistics.

        Returns:
            Dictionary with cache statistics:
            - size: Current number of cached engines
            - max_size: Maximum cache size
            - hits: Lookups answered from the cache
            - misses: Builds started
            - keys: Cached keys (LRU order)
        """
        with self._lock:
            return {
                "size": len(self._engines),
                "max_size": self._config.size,
                "hits": self._hits,
                "misses": self._misses,
                "keys": tuple(self._engines.keys()),
            }
