#!/usr/bin/env python3
# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Benchmarks for genro-arraybag operations.

Run with: python benchmarks/benchmark_array_bag.py
"""

import random
import time

from genro_arraybag import MAX_CAPACITY, ArrayBag


def filled_bag(size: int, values: int = 100, capacity: int = MAX_CAPACITY) -> ArrayBag:
    rng = random.Random(0)
    return ArrayBag(capacity, source=[rng.randrange(values) for _ in range(size)], random_state=rng)


def benchmark_core():
    """Benchmark add, contains, frequency_of and removal."""
    print("\n=== Core Benchmarks ===")

    start = time.perf_counter()
    for _ in range(100):
        bag = ArrayBag(MAX_CAPACITY)
        for i in range(MAX_CAPACITY):
            bag.add(i)
    elapsed = time.perf_counter() - start
    print(f"Fill 10k-slot bag (100): {elapsed*1000:.2f}ms ({elapsed/100*1000:.2f}ms/op)")

    bag = filled_bag(MAX_CAPACITY)
    start = time.perf_counter()
    for value in range(1000):
        bag.contains(value)
    elapsed = time.perf_counter() - start
    print(f"contains on 10k entries (1k): {elapsed*1000:.2f}ms ({elapsed/1000*1e6:.2f}µs/op)")

    start = time.perf_counter()
    for value in range(100):
        bag.frequency_of(value)
    elapsed = time.perf_counter() - start
    print(f"frequency_of on 10k entries (100): {elapsed*1000:.2f}ms ({elapsed/100*1e6:.2f}µs/op)")

    start = time.perf_counter()
    bag.clear()
    elapsed = time.perf_counter() - start
    print(f"clear 10k entries: {elapsed*1000:.2f}ms")


def benchmark_set_operations():
    """Benchmark the set-style operations."""
    print("\n=== Set Operation Benchmarks ===")

    for size in (100, 1000, 5000):
        bag = filled_bag(size)

        start = time.perf_counter()
        bag.get_mode()
        mode_elapsed = time.perf_counter() - start

        other = filled_bag(size)
        start = time.perf_counter()
        bag.equals(other)
        equals_elapsed = time.perf_counter() - start

        start = time.perf_counter()
        bag.split_into(ArrayBag(MAX_CAPACITY), ArrayBag(MAX_CAPACITY))
        split_elapsed = time.perf_counter() - start

        start = time.perf_counter()
        bag.remove_duplicates()
        dedup_elapsed = time.perf_counter() - start

        print(
            f"size {size}: get_mode {mode_elapsed*1000:.2f}ms, equals {equals_elapsed*1000:.2f}ms, "
            f"split_into {split_elapsed*1000:.2f}ms, remove_duplicates {dedup_elapsed*1000:.2f}ms"
        )


def main():
    print("=" * 60)
    print("genro-arraybag Benchmarks")
    print("=" * 60)

    benchmark_core()
    benchmark_set_operations()

    print("\n" + "=" * 60)
    print("Benchmarks completed")
    print("=" * 60)


if __name__ == '__main__':
    main()
