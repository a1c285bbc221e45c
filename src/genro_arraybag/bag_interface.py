# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""BagInterface module - the capability set shared by every bag.

A bag is an unordered collection that allows duplicate entries. This module
only describes WHAT a bag can do; storage strategies live in concrete
subclasses such as ArrayBag.

Operations that take another bag as argument (ArrayBag.add_all,
ArrayBag.split_into) only rely on the methods declared here, so any
implementation can be passed as source or destination.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any


class BagInterface(ABC):
    """Abstract multiset of entries.

    Subclasses implement the nine abstract operations; the Python container
    protocol (len, in, iteration) is derived from them.
    """

    @abstractmethod
    def add(self, entry: Any) -> bool:
        """Add a new entry. Return False if the bag cannot hold it."""

    @abstractmethod
    def remove_random(self) -> Any:
        """Remove one unspecified entry and return it, or None if empty."""

    @abstractmethod
    def remove(self, entry: Any) -> bool:
        """Remove one occurrence of entry. Return True if it was found."""

    @abstractmethod
    def clear(self) -> None:
        """Remove all entries."""

    @abstractmethod
    def size(self) -> int:
        """Return the current number of entries."""

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True if the bag holds no entries."""

    @abstractmethod
    def contains(self, entry: Any) -> bool:
        """Return True if the bag holds at least one entry equal to entry."""

    @abstractmethod
    def frequency_of(self, entry: Any) -> int:
        """Return how many entries are equal to entry."""

    @abstractmethod
    def to_list(self) -> list[Any]:
        """Return a newly allocated list with all the entries."""

    # -------------------------------------------------------------------------
    # Python container protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, entry: Any) -> bool:
        return self.contains(entry)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over a snapshot, so the bag may change during the loop."""
        return iter(self.to_list())
