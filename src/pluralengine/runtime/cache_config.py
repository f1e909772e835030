"""Settings for the process-wide store of built PluralRules engines.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from pluralengine.constants import DEFAULT_ENGINE_CACHE_SIZE

__all__ = ["CacheConfig"]


@dataclass(frozen=True, slots=True)
class CacheConfig:
    """Engine cache settings.

    Attributes:
        size: Maximum cached engines (default: 256). Least recently used
            engines are evicted first.

    Example:
        >>> from pluralengine.runtime.cache import EngineCache
        >>> cache = EngineCache(CacheConfig(size=16))
        >>> cache.cache_info()["max_size"]
        16
    """

    size: int = DEFAULT_ENGINE_CACHE_SIZE

    def __post_init__(self) -> None:
        if self.size <= 0:
            msg = "size must be positive"
            raise ValueError(msg)
