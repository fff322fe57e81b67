"""
Tests for the bounded LRU cache.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from profile_cache.exceptions import CacheMissError
from profile_cache.protocols import CacheStore
from profile_cache.repositories import BoundedLRUCache


def test_satisfies_cache_store_protocol():
    assert isinstance(BoundedLRUCache(capacity=1), CacheStore)


@pytest.mark.parametrize("capacity", [0, -1])
def test_rejects_capacity_below_one(capacity):
    with pytest.raises(ValueError):
        BoundedLRUCache(capacity=capacity)


def test_size_never_exceeds_capacity():
    cache = BoundedLRUCache(capacity=3)
    for i in range(20):
        cache.put(f"user-{i}", i)
        assert len(cache) <= 3
    assert len(cache) == 3


def test_evicts_first_inserted_without_reads():
    cache = BoundedLRUCache(capacity=3)
    for key in ["a", "b", "c", "d"]:
        cache.put(key, key.upper())

    assert "a" not in cache
    assert all(cache.contains(key) for key in ["b", "c", "d"])
    assert cache.stats()["evictions"] == 1


def test_get_promotes_entry():
    cache = BoundedLRUCache(capacity=3)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("c", 3)

    assert cache.get("a") == 1
    cache.put("d", 4)

    assert "b" not in cache
    assert "a" in cache
    assert cache.keys() == ["c", "a", "d"]


def test_contains_does_not_promote():
    cache = BoundedLRUCache(capacity=2)
    cache.put("a", 1)
    cache.put("b", 2)

    assert cache.contains("a")
    cache.put("c", 3)

    assert not cache.contains("a")
    assert cache.keys() == ["b", "c"]


def test_put_overwrites_without_duplicating():
    cache = BoundedLRUCache(capacity=3)
    cache.put("k", "v1")
    cache.put("other", "x")
    size_before = len(cache)

    cache.put("k", "v2")

    assert cache.get("k") == "v2"
    assert len(cache) == size_before
    assert cache.stats()["evictions"] == 0


def test_overwrite_makes_entry_freshest():
    cache = BoundedLRUCache(capacity=2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("a", 10)
    cache.put("c", 3)

    assert cache.keys() == ["a", "c"]


def test_get_missing_raises_cache_miss():
    cache = BoundedLRUCache(capacity=1)
    with pytest.raises(CacheMissError):
        cache.get("nobody")
    # CacheMissError is a KeyError
    with pytest.raises(KeyError):
        cache.get("nobody")


def test_get_if_present_returns_default_on_miss():
    cache = BoundedLRUCache(capacity=1)
    sentinel = object()

    assert cache.get_if_present("nobody") is None
    assert cache.get_if_present("nobody", sentinel) is sentinel


def test_stats_track_hits_and_misses():
    cache = BoundedLRUCache(capacity=2)
    cache.put("a", 1)
    cache.get_if_present("a")
    cache.get_if_present("b")

    stats = cache.stats()
    assert stats == {
        "total_entries": 1,
        "capacity": 2,
        "hits": 1,
        "misses": 1,
        "evictions": 0,
    }


def test_concurrent_puts_respect_capacity():
    cache = BoundedLRUCache(capacity=50)

    def writer(offset: int) -> None:
        for i in range(500):
            key = f"user-{(offset + i) % 200}"
            cache.put(key, i)
            cache.get_if_present(key)

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(writer, range(0, 800, 100)))

    assert len(cache) == 50
    assert len(set(cache.keys())) == 50
