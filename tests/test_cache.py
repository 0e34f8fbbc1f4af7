import threading
import time
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone

import pytest

from viewgrowth.core.names import SamplesVersion
from viewgrowth.runtime.cache import AnalysisCache, AnalysisKey


def key(version="v1", confidence=0.95):
    return AnalysisKey(SamplesVersion(version), datetime(2024, 1, 1, tzinfo=timezone.utc), confidence)


def test_concurrent_requests_compute_once():
    cache = AnalysisCache()
    calls = []
    lock = threading.Lock()

    def compute():
        with lock:
            calls.append(1)
        time.sleep(0.05)
        return "done"

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: cache.get_or_compute(key(), compute), range(16)))

    assert results == ["done"] * 16
    assert len(calls) == 1
    assert cache.misses == 1
    assert cache.hits == 15


def test_distinct_keys_are_distinct_entries():
    cache = AnalysisCache()
    assert cache.get_or_compute(key("a"), lambda: 1) == 1
    assert cache.get_or_compute(key("b"), lambda: 2) == 2
    assert cache.get_or_compute(key("a", 0.9), lambda: 3) == 3
    assert len(cache) == 3
    assert key("a") in cache


def test_failed_computation_is_not_cached():
    cache = AnalysisCache()

    def boom():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        cache.get_or_compute(key(), boom)
    assert key() not in cache
    assert cache.get_or_compute(key(), lambda: "ok") == "ok"


def test_clear_resets_entries_and_counters():
    cache = AnalysisCache()
    cache.get_or_compute(key(), lambda: 1)
    cache.get_or_compute(key(), lambda: 1)
    cache.clear()
    assert len(cache) == 0
    assert (cache.hits, cache.misses) == (0, 0)
