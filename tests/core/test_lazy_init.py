"""Lazy Initialization — tests for exactly-once, race-free construction.

Tests cover:
    - Builder runs once across many get() calls
    - Concurrent first access from many threads builds exactly once and shares the result
    - A failing builder caches nothing; the next get() retries
"""

import threading
import time

import pytest

from fieldguard.core.lazy_init import Lazy


def test_builder_runs_once():
    calls = []
    lazy = Lazy(lambda: calls.append(1) or object())
    first = lazy.get()
    assert lazy.get() is first
    assert len(calls) == 1


def test_initialized_flag():
    lazy = Lazy(lambda: 42)
    assert not lazy.initialized
    assert lazy.get() == 42
    assert lazy.initialized


def test_concurrent_first_access_builds_exactly_once():
    calls = []
    calls_lock = threading.Lock()

    def slow_builder():
        with calls_lock:
            calls.append(1)
        time.sleep(0.05)
        return object()

    lazy = Lazy(slow_builder)
    barrier = threading.Barrier(16)
    results = []
    results_lock = threading.Lock()

    def worker():
        barrier.wait()
        value = lazy.get()
        with results_lock:
            results.append(value)

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(calls) == 1
    assert len(results) == 16
    assert all(r is results[0] for r in results)


def test_failed_build_is_not_cached():
    attempts = []

    def flaky():
        attempts.append(1)
        if len(attempts) == 1:
            raise RuntimeError("first build fails")
        return "ok"

    lazy = Lazy(flaky)
    with pytest.raises(RuntimeError):
        lazy.get()
    assert not lazy.initialized
    assert lazy.get() == "ok"
    assert len(attempts) == 2
