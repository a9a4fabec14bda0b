# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/proto/constraints.py

"""Per-field constrained draws.

Each helper checks its constraint and draws in one place. An unsatisfiable
constraint raises :class:`RandomizationError`; :func:`constrain_field` turns
that into an error report and leaves the field at its prior value so the
transaction is still issued.
"""

from __future__ import annotations

import logging
import random
from typing import Callable

from .errors import RandomizationError
from .transaction import MASK32, MAX_PRE_DELAY

logger = logging.getLogger(__name__)


def rand_in_range(rng: random.Random, low: int, high: int, field: str = "value") -> int:
    """Uniform draw from the closed range [low, high]."""
    if low > high:
        raise RandomizationError(f"{field}: empty range [{low:#x}, {high:#x}]")
    return rng.randint(low, high)


def rand_addr_in_window(rng: random.Random, low: int = 0x0, high: int = 0xFF) -> int:
    """Address inside the window, which must lie in the 32-bit space."""
    if low < 0 or high > MASK32:
        raise RandomizationError(
            f"address: window [{low:#x}, {high:#x}] outside 32-bit space"
        )
    return rand_in_range(rng, low, high, field="address")


def rand_delay(rng: random.Random, max_delay: int = MAX_PRE_DELAY) -> int:
    return rand_in_range(rng, 0, max_delay, field="pre_delay")


def constrain_field(item: object, field: str, draw: Callable[[], int]) -> bool:
    """Set ``item.<field>`` from ``draw()``.

    Returns False, after logging, when the draw is unsatisfiable; the field then
    keeps whatever value it had.
    """
    try:
        value = draw()
    except RandomizationError as exc:
        logger.error(
            "randomization failed (%s); keeping %s=%r", exc, field, getattr(item, field)
        )
        return False
    setattr(item, field, value)
    return True
