# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/proto/scenarios.py

"""Sequence generator: the ordered request streams fed to the master."""

from __future__ import annotations

import logging
import random
from typing import Callable

from .constraints import constrain_field, rand_addr_in_window, rand_delay
from .transaction import Transaction

logger = logging.getLogger(__name__)

FIXED_ADDR = 0x0000_0010
FIXED_DATA = 0xA5A5_A5A5
RANDOM_DATA = 0xC0DE_C0DE
DEFAULT_REPS = 5
DEFAULT_WINDOW = (0x0, 0xFF)


def fixed_write_read(
    address: int = FIXED_ADDR, data: int = FIXED_DATA
) -> list[Transaction]:
    """One write then one read of the same address, no delay."""
    return [Transaction.write(address, data), Transaction.read(address)]


def random_write_read(  # pylint: disable=too-many-arguments
    reps: int = DEFAULT_REPS,
    rng: random.Random | None = None,
    *,
    low: int = DEFAULT_WINDOW[0],
    high: int = DEFAULT_WINDOW[1],
    data: int = RANDOM_DATA,
    randomize_delay: bool = False,
) -> list[Transaction]:
    """``reps`` pairs of (write ``data`` to a random address, read a random
    address), both addresses drawn independently from [low, high].

    Delays stay 0 unless ``randomize_delay``, then they are drawn from [0, 5].
    """
    if reps < 0:
        raise ValueError(f"reps must be >= 0, got {reps}")
    rng = rng or random.Random()
    out: list[Transaction] = []
    for _ in range(reps):
        wr = Transaction.write(0, data)
        rd = Transaction.read(0)
        for tr in (wr, rd):
            constrain_field(tr, "address", lambda: rand_addr_in_window(rng, low, high))
            if randomize_delay:
                constrain_field(tr, "pre_delay", lambda: rand_delay(rng))
        out += [wr, rd]
    logger.debug("random_write_read: %d requests", len(out))
    return out


SCENARIOS: dict[str, Callable[..., list[Transaction]]] = {
    "fixed": fixed_write_read,
    "random": random_write_read,
}
