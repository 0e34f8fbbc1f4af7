"""
viewgrowth.runtime.cache
========================

Memoisation of analysis results.

An analysis is identified by what it depends on: the content of the sample
set, the cutoff instant and the confidence level. `AnalysisCache` computes a
result at most once per key, even when several threads ask for the same key at
the same time; concurrent requests for different keys do not block each other.

Examples
--------
>>> from datetime import datetime, timezone
>>> from viewgrowth.core.names import SamplesVersion
>>> cache = AnalysisCache()
>>> key = AnalysisKey(SamplesVersion("abc"), datetime(2024, 1, 1, tzinfo=timezone.utc), 0.95)
>>> calls = []
>>> cache.get_or_compute(key, lambda: calls.append(1) or "result")
'result'
>>> cache.get_or_compute(key, lambda: calls.append(1) or "other")
'result'
>>> len(calls), cache.hits, cache.misses
(1, 1, 1)
"""

from __future__ import annotations
import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, Generic, TypeVar

from viewgrowth.core.names import SamplesVersion

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class AnalysisKey:
    """Everything a growth analysis result depends on."""

    samples_version: SamplesVersion
    cutoff: datetime
    confidence: float


class AnalysisCache(Generic[T]):
    """Thread-safe, read-mostly memo with at-most-one computation per key."""

    def __init__(self) -> None:
        self._entries: Dict[AnalysisKey, T] = {}
        self._key_locks: Dict[AnalysisKey, threading.Lock] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def _lookup(self, key: AnalysisKey) -> tuple:
        with self._lock:
            if key in self._entries:
                self.hits += 1
                return True, self._entries[key]
        return False, None

    def get_or_compute(self, key: AnalysisKey, compute: Callable[[], T]) -> T:
        """Return the cached value for `key`, computing it on first request."""
        found, value = self._lookup(key)
        if found:
            logger.debug("Analysis cache hit for %s", key)
            return value

        with self._lock:
            key_lock = self._key_locks.setdefault(key, threading.Lock())

        with key_lock:
            # another thread may have finished while we waited
            found, value = self._lookup(key)
            if found:
                return value
            logger.debug("Analysis cache miss for %s", key)
            try:
                value = compute()
                with self._lock:
                    self._entries[key] = value
                    self.misses += 1
            finally:
                with self._lock:
                    self._key_locks.pop(key, None)
        return value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0
