# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""genro-arraybag: fixed-capacity multiset containers.

This package provides:

- BagInterface: abstract capability set of a bag (unordered, duplicates allowed)
- ArrayBag: bag stored in a fixed-size list, with swap-removal
- ArrayBagException: raised on invalid capacity or uninitialized use

Example:
    from genro_arraybag import ArrayBag

    bag = ArrayBag(capacity=10, source=[1, 1, 2])
    bag.get_mode()  # 1
"""

from .array_bag import DEFAULT_CAPACITY, MAX_CAPACITY, ArrayBag, ArrayBagException
from .bag_interface import BagInterface

__version__ = '0.1.0'

__all__ = [
    'ArrayBag',
    'ArrayBagException',
    'BagInterface',
    'DEFAULT_CAPACITY',
    'MAX_CAPACITY',
]
