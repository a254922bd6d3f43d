"""Tests for the bounded LRU caches and the cache registry."""

import threading

import pytest

from wcaglab.core.cache import CacheRegistry, CacheStats, ColorCache


def test_least_recently_used_entry_is_evicted():
    cache = ColorCache(max_size=2)
    cache.set("A", 1)
    cache.set("B", 2)
    assert cache.get("A") == 1  # A becomes most recent
    cache.set("C", 3)

    assert "B" not in cache
    assert cache.get("A") == 1
    assert cache.get("C") == 3
    assert len(cache) == 2


def test_overwrite_promotes_key():
    cache = ColorCache(max_size=2)
    cache.set("A", 1)
    cache.set("B", 2)
    cache.set("A", 10)
    cache.set("C", 3)

    assert cache.keys() == ["A", "C"]
    assert cache.get("A") == 10


def test_has_does_not_promote():
    cache = ColorCache(max_size=2)
    cache.set("A", 1)
    cache.set("B", 2)
    assert cache.has("A")
    cache.set("C", 3)

    assert not cache.has("A")
    assert cache.has("B")


def test_get_miss_returns_none():
    cache = ColorCache(max_size=3)
    assert cache.get("missing") is None
    assert cache.size == 0


def test_size_never_exceeds_capacity():
    cache = ColorCache(max_size=5)
    for i in range(50):
        cache.set(i, i)
        assert cache.size <= 5
    assert cache.keys() == [45, 46, 47, 48, 49]


def test_stats_report_utilization():
    cache = ColorCache(max_size=4)
    cache.set("a", 1)
    cache.set("b", 2)
    assert cache.get_stats() == CacheStats(size=2, max_size=4, utilization_percent=50.0)


def test_clear_empties_cache():
    cache = ColorCache(max_size=4)
    cache.set("a", 1)
    cache.clear()
    assert cache.size == 0
    assert cache.get("a") is None


@pytest.mark.parametrize("capacity", [0, -1])
def test_capacity_below_one_is_rejected(capacity):
    with pytest.raises(ValueError):
        ColorCache(max_size=capacity)


def test_registry_defaults_and_stats():
    registry = CacheRegistry()
    stats = registry.stats()
    assert set(stats) == {"parse_cache", "conversion_cache", "luminance_cache", "contrast_cache"}
    assert stats["parse_cache"].max_size == 1000
    assert stats["conversion_cache"].max_size == 500
    assert stats["luminance_cache"].max_size == 500
    assert stats["contrast_cache"].max_size == 500
    assert all(s.size == 0 for s in stats.values())


def test_registry_clear_resets_every_cache():
    registry = CacheRegistry(parse_size=2, conversion_size=2, luminance_size=2, contrast_size=2)
    registry.parse.set("red", 1)
    registry.conversion.set(("hsl", 0, 0, 0), 2)
    registry.luminance.set((0, 0, 0), 0.0)
    registry.contrast.set(((0, 0, 0, 1.0), (1, 1, 1)), 1.0)
    registry.clear()
    assert all(s.size == 0 for s in registry.stats().values())


def test_thread_safe_cache_survives_concurrent_writers():
    cache = ColorCache(max_size=16, thread_safe=True)

    def writer(offset):
        for i in range(500):
            cache.set(offset + i, i)
            cache.get(offset + i // 2)

    threads = [threading.Thread(target=writer, args=(n * 1000,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert cache.size == 16
