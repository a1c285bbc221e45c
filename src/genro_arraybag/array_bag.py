# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""ArrayBag module - a bag whose entries live in a fixed-size list.

The ArrayBag stores its entries in a list allocated once at construction.
Occupied slots are always packed at the front of the list, so removal
moves the last entry into the freed slot (swap-removal). This keeps every
removal O(1) but means the bag gives no ordering guarantee once an entry
has been removed.

Key features:
    - Fixed capacity, chosen at construction (default 25, max 10000)
    - Overflow and not-found are reported as False, never raised
    - Random removal driven by an injectable random.Random
    - Set-style operations: duplicate_all, remove_duplicates, add_all,
      split_into, get_mode, multiset equality

Example:
    >>> bag = ArrayBag(capacity=4)
    >>> bag.add('a'), bag.add('b'), bag.add('a')
    (True, True, True)
    >>> bag.frequency_of('a')
    2
    >>> print(bag)
    Bag{Size:3 [a] [b] [a] }
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable
from typing import Any

from genro_toolbox import safe_is_instance

from .bag_interface import BagInterface

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 25
MAX_CAPACITY = 10000


class ArrayBagException(Exception):
    """Exception raised for ArrayBag misuse.

    Raised when a bag is created with an invalid capacity, when the
    initial source does not fit, or when a bag that was never initialized
    is used. Ordinary outcomes such as a full bag are not exceptions.
    """
    pass


class ArrayBag(BagInterface):
    """Fixed-capacity bag backed by a contiguous list.

    Attributes:
        random_state: The random.Random used by remove_random().

    Internal Attributes:
        _bag: List of length capacity; slots past the entry count hold None.
        _number_of_entries: Count of occupied slots.
        _initialized: Set at the end of a successful __init__.
    """

    __hash__ = None  # mutable container

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        source: Iterable[Any] | BagInterface | None = None,
        random_state: random.Random | None = None,
    ) -> None:
        """Create an empty bag having a given capacity.

        Args:
            capacity: Number of slots, between 1 and MAX_CAPACITY.
            source: Optional iterable or bag whose entries are added.
            random_state: Random generator for remove_random(). A new
                random.Random is created if not given.

        Raises:
            ArrayBagException: If capacity is out of range, or source holds
                more entries than capacity.
        """
        self._initialized = False
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise ArrayBagException(f"Bag capacity must be an int, got {capacity!r}")
        if capacity > MAX_CAPACITY:
            raise ArrayBagException(
                "Attempt to create a bag whose capacity exceeds allowed maximum."
            )
        if capacity < 1:
            raise ArrayBagException(f"Bag capacity must be at least 1, got {capacity}")

        self._bag: list[Any] = [None] * capacity
        self._number_of_entries: int = 0
        self.random_state = random_state or random.Random()
        self._initialized = True

        if source is not None and not self.fill_from(source):
            raise ArrayBagException(
                f"Source has more entries than bag capacity ({capacity})"
            )

    def _check_initialization(self) -> None:
        if not getattr(self, '_initialized', False):
            raise ArrayBagException("ArrayBag object is not initialized properly.")

    @property
    def capacity(self) -> int:
        """Number of slots, fixed at construction."""
        return len(self._bag)

    def fill_from(self, source: Iterable[Any] | BagInterface) -> bool:
        """Add every entry of source to this bag.

        Args:
            source: Another bag or any iterable of entries.

        Returns:
            True if all entries were added. False if the bag filled up;
            the entries added before that point are kept.
        """
        self._check_initialization()
        if safe_is_instance(source, 'genro_arraybag.bag_interface.BagInterface'):
            entries = source.to_list()
        else:
            entries = list(source)
        for entry in entries:
            if not self.add(entry):
                return False
        return True

    # -------------------------------------------------------------------------
    # Core
    # -------------------------------------------------------------------------

    def add(self, entry: Any) -> bool:
        """Add a new entry to this bag.

        Args:
            entry: The object to be added as a new entry.

        Returns:
            True if the addition is successful, or False if the bag is full.
        """
        self._check_initialization()
        if self.is_full():
            logger.debug(f"Bag full (capacity {self.capacity}), refused entry {entry!r}")
            return False
        self._bag[self._number_of_entries] = entry
        self._number_of_entries += 1
        return True

    def is_full(self) -> bool:
        self._check_initialization()
        return self._number_of_entries >= len(self._bag)

    def is_empty(self) -> bool:
        self._check_initialization()
        return self._number_of_entries == 0

    def size(self) -> int:
        self._check_initialization()
        return self._number_of_entries

    def frequency_of(self, entry: Any) -> int:
        """Count the number of times a given entry appears in this bag."""
        self._check_initialization()
        counter = 0
        for index in range(self._number_of_entries):
            if self._bag[index] == entry:
                counter += 1
        return counter

    def contains(self, entry: Any) -> bool:
        self._check_initialization()
        return self._get_index_of(entry) > -1

    def to_list(self) -> list[Any]:
        """Return a newly allocated list of all the entries, in slot order."""
        self._check_initialization()
        return self._bag[:self._number_of_entries]

    def clear(self) -> None:
        """Remove all entries from this bag."""
        self._check_initialization()
        while not self.is_empty():
            self.remove_random()

    # -------------------------------------------------------------------------
    # Removal
    # -------------------------------------------------------------------------

    def remove_random(self) -> Any:
        """Remove one unspecified entry from this bag, if possible.

        The slot is chosen uniformly at random with random_state.

        Returns:
            The removed entry, or None if the bag is empty.
        """
        self._check_initialization()
        if self.is_empty():
            return None
        return self._remove_entry(self.random_state.randrange(self._number_of_entries))

    def remove(self, entry: Any) -> bool:
        """Remove one occurrence of a given entry from this bag.

        The first match in current slot order is removed. Slot order is not
        insertion order once any removal has happened.

        Args:
            entry: The entry to be removed.

        Returns:
            True if an entry was found and removed, False otherwise.
        """
        self._check_initialization()
        index = self._get_index_of(entry)
        if index < 0:
            return False
        self._remove_entry(index)
        return True

    def _remove_entry(self, index: int) -> Any:
        """Swap-remove the entry at index and return it.

        The last occupied slot is moved into index. Returns None if the bag
        is empty or index is not in [0, count).
        """
        if self.is_empty() or not 0 <= index < self._number_of_entries:
            return None
        last = self._number_of_entries - 1
        result = self._bag[index]
        self._bag[index] = self._bag[last]
        self._bag[last] = None
        self._number_of_entries = last
        return result

    def _get_index_of(self, entry: Any) -> int:
        """Return the index of the first slot equal to entry, or -1."""
        for index in range(self._number_of_entries):
            if self._bag[index] == entry:
                return index
        return -1

    # -------------------------------------------------------------------------
    # Set-style operations
    # -------------------------------------------------------------------------

    def _frequency_table(self) -> list[tuple[Any, int]]:
        """Return (entry, frequency) for each distinct entry.

        Rows follow the slot order of each entry's first occurrence. Only
        equality is used, so entries do not need to be hashable.
        """
        table: list[list[Any]] = []
        for index in range(self._number_of_entries):
            entry = self._bag[index]
            for row in table:
                if row[0] == entry:
                    row[1] += 1
                    break
            else:
                table.append([entry, 1])
        return [(entry, frequency) for entry, frequency in table]

    def duplicate_all(self) -> bool:
        """Add a second copy of every entry.

        Returns:
            True if the duplication was done. False if capacity is smaller
            than twice the current size; the bag is then left unchanged.
        """
        self._check_initialization()
        entries = self.to_list()
        if 2 * len(entries) > self.capacity:
            logger.debug(
                f"duplicate_all refused: {len(entries)} entries, capacity {self.capacity}"
            )
            return False
        for entry in entries:
            self.add(entry)
        return True

    def remove_duplicates(self) -> None:
        """Keep a single copy of every distinct entry."""
        self._check_initialization()
        index = 0
        while index < self._number_of_entries:
            kept = self._bag[index]
            other = index + 1
            while other < self._number_of_entries:
                if self._bag[other] == kept:
                    # the last entry lands in `other`, so look at it again
                    self._remove_entry(other)
                else:
                    other += 1
            index += 1

    def add_all(self, other: BagInterface) -> bool:
        """Add every entry of another bag to this bag.

        Entries are added one at a time. If this bag fills up, the merge
        stops and the entries already added stay in place.

        Args:
            other: The bag whose entries are added. It is not modified.

        Returns:
            True if every entry was added (always True for an empty other),
            False if the merge stopped on overflow.
        """
        self._check_initialization()
        entries = other.to_list()
        for added, entry in enumerate(entries):
            if not self.add(entry):
                logger.debug(f"add_all stopped on overflow after {added} of {len(entries)} entries")
                return False
        return True

    def split_into(self, first: BagInterface, second: BagInterface) -> bool:
        """Distribute the entries of this bag into two other bags.

        The first half of the entries goes to first, the rest to second.
        With an odd number of entries the extra one goes to first. This bag
        is not modified.

        Args:
            first: Destination for the first ceil(size / 2) entries.
            second: Destination for the remaining entries.

        Returns:
            True if every entry was placed. False as soon as a destination
            overflows; entries already placed are not taken back.
        """
        self._check_initialization()
        entries = self.to_list()
        half = (len(entries) + 1) // 2
        for destination, part in ((first, entries[:half]), (second, entries[half:])):
            for entry in part:
                if not destination.add(entry):
                    logger.debug(f"split_into stopped: destination full at entry {entry!r}")
                    return False
        return True

    def get_mode(self) -> Any:
        """Return the entry with the strictly highest frequency.

        Distinct entries are scanned in slot order. A frequency higher than
        the current maximum takes the mode; a frequency equal to it cancels
        the mode, until a later higher frequency shows up.

        Returns:
            The mode, or None for an empty bag or a tie at the top.
        """
        self._check_initialization()
        mode = None
        largest_frequency = 0
        for entry, frequency in self._frequency_table():
            if frequency > largest_frequency:
                largest_frequency = frequency
                mode = entry
            elif frequency == largest_frequency:
                mode = None
        return mode

    def equals(self, other: BagInterface) -> bool:
        """Check whether two bags hold the same multiset of entries.

        Slot order is ignored: every distinct entry must have the same
        frequency in both bags.
        """
        self._check_initialization()
        if self.size() != other.size():
            return False
        return all(
            other.frequency_of(entry) == frequency
            for entry, frequency in self._frequency_table()
        )

    def __eq__(self, other: object) -> bool:
        if not safe_is_instance(other, 'genro_arraybag.array_bag.ArrayBag'):
            return NotImplemented
        return self.equals(other)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        """Render as Bag{Size:n [e1] [e2] ... } in slot order."""
        self._check_initialization()
        cells = ''.join(f'[{entry}] ' for entry in self.to_list())
        return f'Bag{{Size:{self._number_of_entries} {cells}}}'

    def __repr__(self) -> str:
        if not getattr(self, '_initialized', False):
            return f'<{type(self).__name__} (uninitialized) at {id(self)}>'
        return f'ArrayBag(capacity={self.capacity}, entries={self.to_list()!r})'
