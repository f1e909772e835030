"""Tests for EngineCache - LRU storage with single-flight builds."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from pluralengine import EngineBuildError, PluralRules, StaticRuleProvider
from pluralengine.runtime import CacheConfig, EngineCache


def english() -> PluralRules:
    return PluralRules.from_rules("en", "cardinal", {"one": "i = 1 and v = 0"})


class TestCacheConfig:
    """Configuration validation."""

    def test_default_size(self) -> None:
        """CacheConfig() uses the library default size."""
        assert CacheConfig().size == 256

    @pytest.mark.parametrize("size", [0, -1])
    def test_size_must_be_positive(self, size: int) -> None:
        """Zero and negative sizes are configuration errors."""
        with pytest.raises(ValueError, match="size must be positive"):
            CacheConfig(size=size)

    def test_config_is_frozen(self) -> None:
        """CacheConfig cannot be changed after construction."""
        config = CacheConfig(size=4)
        with pytest.raises(AttributeError):
            config.size = 8  # type: ignore[misc]


class TestEngineCache:
    """Single-threaded cache behavior."""

    def test_builds_once(self) -> None:
        """A second request for the same key is a cache hit."""
        cache = EngineCache()
        calls: list[int] = []

        def build() -> PluralRules:
            calls.append(1)
            return english()

        first = cache.get_or_build("en", build)
        second = cache.get_or_build("en", build)

        assert first is second
        assert len(calls) == 1
        info = cache.cache_info()
        assert info["hits"] == 1
        assert info["misses"] == 1

    def test_get_miss_returns_none(self) -> None:
        """get() on an absent key returns None."""
        assert EngineCache().get("missing") is None

    def test_lru_eviction(self) -> None:
        """The least recently used engine is evicted first."""
        cache = EngineCache(CacheConfig(size=2))
        cache.get_or_build("a", english)
        cache.get_or_build("b", english)
        cache.get("a")  # a becomes most recently used
        cache.get_or_build("c", english)

        assert len(cache) == 2
        assert cache.get("b") is None
        assert cache.cache_info()["keys"] == ("a", "c")

    def test_failed_build_is_not_cached(self) -> None:
        """A build that raises is retried on the next request."""
        cache = EngineCache()
        attempts: list[int] = []

        def failing() -> PluralRules:
            attempts.append(1)
            return PluralRules.from_rules("xx", "cardinal", {"one": "n ="})

        for _ in range(2):
            with pytest.raises(EngineBuildError):
                cache.get_or_build("xx", failing)

        assert len(attempts) == 2
        assert len(cache) == 0

    def test_clear_resets_statistics(self) -> None:
        """clear() empties the cache and zeroes hit/miss counts."""
        cache = EngineCache()
        cache.get_or_build("en", english)
        cache.get_or_build("en", english)
        cache.clear()

        assert cache.cache_info() == {
            "size": 0,
            "max_size": 256,
            "hits": 0,
            "misses": 0,
            "keys": (),
        }


class TestConcurrentBuilds:
    """At most one build per key, however many threads ask."""

    def test_concurrent_callers_share_one_build(self) -> None:
        """Threads asking for one key wait for a single build."""
        cache = EngineCache()
        started = threading.Event()
        release = threading.Event()
        calls: list[int] = []

        def slow_build() -> PluralRules:
            calls.append(1)
            started.set()
            release.wait(timeout=5)
            return english()

        with ThreadPoolExecutor(max_workers=8) as pool:
            futures = [pool.submit(cache.get_or_build, "en", slow_build) for _ in range(8)]
            assert started.wait(timeout=5)
            release.set()
            results = [f.result(timeout=5) for f in futures]

        assert len(calls) == 1
        assert all(r is results[0] for r in results)

    def test_other_keys_are_not_blocked(self) -> None:
        """A slow build only blocks callers of its own key."""
        cache = EngineCache()
        release = threading.Event()
        started = threading.Event()

        def blocked_build() -> PluralRules:
            started.set()
            release.wait(timeout=5)
            return english()

        with ThreadPoolExecutor(max_workers=2) as pool:
            blocked = pool.submit(cache.get_or_build, "slow", blocked_build)
            assert started.wait(timeout=5)
            # Completes while "slow" is still building.
            fast = cache.get_or_build("fast", english)
            assert not blocked.done()
            release.set()
            blocked.result(timeout=5)

        assert fast is cache.get("fast")

    def test_public_create_from_many_threads(self) -> None:
        """PluralRules.create() from many threads yields one engine."""
        provider = StaticRuleProvider({"en": {"cardinal": {"one": "i = 1 and v = 0"}}})

        with ThreadPoolExecutor(max_workers=16) as pool:
            engines = list(
                pool.map(lambda _: PluralRules.create("en", provider=provider), range(64))
            )

        assert all(e is engines[0] for e in engines)
        assert PluralRules.cache_info()["misses"] == 1
