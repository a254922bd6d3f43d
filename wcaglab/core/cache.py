#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: wcaglab/core/cache.py

"""
Bounded least-recently-used caches for parsed colors and derived values.

O(1) insert, lookup and eviction through OrderedDict: the front of the dict
is the least-recently-used key, every read or overwrite moves a key to the
back. Caches hold pure-function results only, so dropping them at any time
changes latency, never answers.

Not thread-safe unless built with `thread_safe=True`; a hit is a
read-then-promote sequence and is not atomic otherwise.
"""

import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Dict, Generic, Hashable, Optional, TypeVar

from . import config as c

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_MISSING = object()


@dataclass(frozen=True)
class CacheStats:
    size: int
    max_size: int
    utilization_percent: float


class ColorCache(Generic[K, V]):
    """A size-bound LRU mapping."""

    def __init__(self, max_size: int = c.PARSE_CACHE_SIZE, thread_safe: bool = False) -> None:
        if max_size < 1:
            raise ValueError(f"cache capacity must be at least 1, got {max_size}")
        self.max_size = max_size
        self._store: "OrderedDict[K, V]" = OrderedDict()
        self._lock: Optional[threading.Lock] = threading.Lock() if thread_safe else None

    def _get(self, key: K) -> Optional[V]:
        value = self._store.get(key, _MISSING)
        if value is _MISSING:
            return None
        # Move to end (most recently used)
        self._store.move_to_end(key, last=True)
        return value

    def _set(self, key: K, value: V) -> None:
        if key in self._store:
            self._store.move_to_end(key, last=True)
        elif len(self._store) >= self.max_size:
            # popitem(last=False) pops LRU
            self._store.popitem(last=False)
        self._store[key] = value

    def get(self, key: K) -> Optional[V]:
        """Return the cached value, or None, and mark the key as recently used."""
        if self._lock is None:
            return self._get(key)
        with self._lock:
            return self._get(key)

    def set(self, key: K, value: V) -> None:
        """Insert or overwrite; evicts the LRU entry when full."""
        if self._lock is None:
            self._set(key, value)
            return
        with self._lock:
            self._set(key, value)

    def has(self, key: K) -> bool:
        """Membership test that does not count as a use."""
        return key in self._store

    __contains__ = has

    def clear(self) -> None:
        if self._lock is None:
            self._store.clear()
            return
        with self._lock:
            self._store.clear()

    @property
    def size(self) -> int:
        return len(self._store)

    def __len__(self) -> int:
        return len(self._store)

    def keys(self) -> list:
        """Keys from least to most recently used."""
        return list(self._store.keys())

    def get_stats(self) -> CacheStats:
        size = len(self._store)
        return CacheStats(
            size=size,
            max_size=self.max_size,
            utilization_percent=(size / self.max_size) * 100,
        )


class CacheRegistry:
    """
    The four caches used by the engine, one per kind of computation so that
    a key like 'red' in the parse cache never collides with a conversion key.
    """

    def __init__(
        self,
        parse_size: int = c.PARSE_CACHE_SIZE,
        conversion_size: int = c.CONVERSION_CACHE_SIZE,
        luminance_size: int = c.LUMINANCE_CACHE_SIZE,
        contrast_size: int = c.CONTRAST_CACHE_SIZE,
        thread_safe: bool = False,
    ) -> None:
        self.parse: ColorCache[str, Any] = ColorCache(parse_size, thread_safe)
        self.conversion: ColorCache[tuple, Any] = ColorCache(conversion_size, thread_safe)
        self.luminance: ColorCache[tuple, float] = ColorCache(luminance_size, thread_safe)
        self.contrast: ColorCache[tuple, float] = ColorCache(contrast_size, thread_safe)

    def clear(self) -> None:
        self.parse.clear()
        self.conversion.clear()
        self.luminance.clear()
        self.contrast.clear()

    def stats(self) -> Dict[str, CacheStats]:
        return {
            "parse_cache": self.parse.get_stats(),
            "conversion_cache": self.conversion.get_stats(),
            "luminance_cache": self.luminance.get_stats(),
            "contrast_cache": self.contrast.get_stats(),
        }
