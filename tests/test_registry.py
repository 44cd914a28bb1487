"""
Value registry: caching and NaN payload rotation
"""

from __future__ import annotations

import math
import threading
from collections import Counter

from tinyfloat import REGISTRY, TinyFloat, ValueRegistry


class Box:
    def __init__(self, byte):
        self.byte = byte


def test_intern_caches_non_nan():
    reg = ValueRegistry(Box)
    a = reg.intern(0x12)
    assert reg.intern(0x12) is a
    assert a.byte == 0x12
    assert 0x12 in reg
    assert len(reg) == 1


def test_intern_never_caches_nan():
    reg = ValueRegistry(Box)
    a = reg.intern(0x79)
    b = reg.intern(0x79)
    assert a is not b
    assert 0x79 not in reg
    assert len(reg) == 0


def test_cache_bound():
    reg = ValueRegistry(Box)
    for b in range(256):
        reg.intern(b)
    assert len(reg) == 242


def test_nan_rotation_skips_zero_mantissa():
    reg = ValueRegistry(Box)
    seq = [reg.next_nan_payload() for _ in range(28)]
    cycle = [1, 2, 3, 4, 5, 6, 7, 9, 10, 11, 12, 13, 14, 15]
    assert seq == cycle + cycle


def test_reset_nan_counter():
    reg = ValueRegistry(Box)
    reg.next_nan_payload()
    reg.next_nan_payload()
    reg.reset_nan_counter()
    assert reg.next_nan_payload() == 1


def test_registry_encode_and_construct():
    reg = ValueRegistry(Box)
    assert reg.encode(20) == 0x12
    assert reg.encode(math.nan) == 0x79
    assert reg.encode("nope") == 0x7A
    assert reg.encode() == 0x7B
    assert reg.construct(20) is reg.construct("20.9")


def test_registries_are_independent():
    reg = ValueRegistry(Box)
    assert reg.construct(5) is not REGISTRY.construct(5)
    assert REGISTRY.construct(5) is TinyFloat(5)


def test_concurrent_intern_single_instance():
    reg = ValueRegistry(Box)
    results = []
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        results.append([reg.intern(b) for b in range(0, 0x78)])

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    for row in results[1:]:
        assert all(a is b for a, b in zip(row, results[0]))


def test_concurrent_nan_payloads_stay_balanced():
    reg = ValueRegistry(Box)
    seen = []
    lock = threading.Lock()

    def worker():
        got = [reg.next_nan_payload() for _ in range(14 * 5)]
        with lock:
            seen.extend(got)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    counts = Counter(seen)
    assert len(counts) == 14
    assert set(counts.values()) == {20}
