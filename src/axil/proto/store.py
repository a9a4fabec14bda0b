# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/proto/store.py

"""Sparse word store behind the slave responder."""

from __future__ import annotations

import logging
from typing import Iterator

from .transaction import FULL_STRB, MASK32

logger = logging.getLogger(__name__)

DEFAULT_SENTINEL = 0xDEAD_BEEF


def merge_strobes(old: int, new: int, strb: int) -> int:
    """Return ``old`` with the bytes selected by ``strb`` replaced from ``new``."""
    out = old
    for lane in range(4):
        if strb & (1 << lane):
            sel = 0xFF << (8 * lane)
            out = (out & ~sel) | (new & sel)
    return out & MASK32


class SparseStore:
    """Address to word map. Unwritten addresses read back as ``sentinel``.

    Only the slave responder mutates the store. Reset does not clear it.
    """

    def __init__(self, sentinel: int = DEFAULT_SENTINEL) -> None:
        self.sentinel: int = sentinel & MASK32
        self._words: dict[int, int] = {}

    def read(self, address: int) -> int:
        return self._words.get(address & MASK32, self.sentinel)

    def write(self, address: int, data: int, strb: int = FULL_STRB) -> int:
        """Merge ``data`` into the word at ``address`` and return the new word.

        A partial write to an absent word merges over zero.
        """
        address &= MASK32
        if strb & FULL_STRB == FULL_STRB:
            word = data & MASK32
        else:
            word = merge_strobes(self._words.get(address, 0), data, strb)
        self._words[address] = word
        logger.debug("store[0x%08x] <= 0x%08x (strb=0x%x)", address, word, strb)
        return word

    def clear(self) -> None:
        self._words.clear()

    def __contains__(self, address: object) -> bool:
        return isinstance(address, int) and (address & MASK32) in self._words

    def __len__(self) -> int:
        return len(self._words)

    def items(self) -> Iterator[tuple[int, int]]:
        return iter(sorted(self._words.items()))
