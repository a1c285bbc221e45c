# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Pytest configuration and fixtures."""

import random

import pytest

from genro_arraybag import ArrayBag, BagInterface


class ListBag(BagInterface):
    """Unbounded bag backed by a plain list, used as a second implementation."""

    def __init__(self, entries=None):
        self._entries = list(entries or [])

    def add(self, entry):
        self._entries.append(entry)
        return True

    def remove_random(self):
        return self._entries.pop() if self._entries else None

    def remove(self, entry):
        if entry in self._entries:
            self._entries.remove(entry)
            return True
        return False

    def clear(self):
        self._entries.clear()

    def size(self):
        return len(self._entries)

    def is_empty(self):
        return not self._entries

    def contains(self, entry):
        return entry in self._entries

    def frequency_of(self, entry):
        return self._entries.count(entry)

    def to_list(self):
        return list(self._entries)


@pytest.fixture
def rng():
    """Seeded random generator, so random removals are reproducible."""
    return random.Random(1234)


@pytest.fixture
def numbers_bag(rng):
    """Bag holding [1, 2, 2, 3] with room for 10 entries."""
    return ArrayBag(capacity=10, source=[1, 2, 2, 3], random_state=rng)


@pytest.fixture
def list_bag():
    """Factory for ListBag instances."""
    return ListBag
