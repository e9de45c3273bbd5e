"""
Tests for PortAllocator: uniqueness, reuse after release, and exhaustion.
"""

import threading

import pytest

from vlcdriver.errors import PortAllocationError, PortsExhaustedError
from vlcdriver.ports import PortAllocator


class TestPortAllocator:

    def test_starts_at_configured_port(self):
        allocator = PortAllocator(start_port=9000)
        assert allocator.new_port() == 9000
        assert allocator.new_port() == 9001

    def test_released_port_is_reissued(self):
        allocator = PortAllocator(start_port=9000)
        first = allocator.new_port()
        allocator.new_port()
        allocator.release_port(first)
        assert allocator.new_port() == first

    def test_release_of_unknown_port_raises(self):
        allocator = PortAllocator(start_port=9000)
        with pytest.raises(PortAllocationError):
            allocator.release_port(9000)

    def test_double_release_raises(self):
        allocator = PortAllocator(start_port=9000)
        port = allocator.new_port()
        allocator.release_port(port)
        with pytest.raises(PortAllocationError):
            allocator.release_port(port)

    def test_bounded_range_exhausts_with_distinct_error(self):
        allocator = PortAllocator(start_port=9000, end_port=9001)
        allocator.new_port()
        allocator.new_port()
        with pytest.raises(PortsExhaustedError):
            allocator.new_port()
        assert allocator.in_use == {9000, 9001}

    def test_end_below_start_is_rejected(self):
        with pytest.raises(ValueError):
            PortAllocator(start_port=9000, end_port=8999)


class TestConcurrentAllocation:

    def test_concurrent_new_port_never_duplicates(self):
        allocator = PortAllocator(start_port=10000)
        results: list[int] = []
        lock = threading.Lock()

        def worker():
            for _ in range(50):
                port = allocator.new_port()
                with lock:
                    results.append(port)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 400
        assert len(set(results)) == 400
        assert allocator.in_use == frozenset(results)

    def test_concurrent_allocate_release_keeps_held_ports_unique(self):
        allocator = PortAllocator(start_port=10000)
        held: set[int] = set()
        held_lock = threading.Lock()
        duplicates: list[int] = []

        def worker():
            for _ in range(200):
                port = allocator.new_port()
                with held_lock:
                    if port in held:
                        duplicates.append(port)
                    held.add(port)
                with held_lock:
                    held.discard(port)
                allocator.release_port(port)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert duplicates == []
        assert allocator.in_use == frozenset()
