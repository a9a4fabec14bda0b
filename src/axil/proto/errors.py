# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/proto/errors.py

"""Exception hierarchy for the protocol engine."""

from __future__ import annotations


class AxilError(Exception):
    """Base class for protocol engine errors."""


class BusOwnershipError(AxilError):
    """Raised when a role drives a signal it does not own."""


class RandomizationError(AxilError, ValueError):
    """Raised when a field is narrowed to an unsatisfiable range."""


class SimulationTimeout(AxilError):
    """Raised by the cycle kernel when the cycle budget is exhausted."""

    def __init__(self, cycles: int, pending: object | None = None) -> None:
        self.cycles = cycles
        self.pending = pending
        msg = f"no progress after {cycles} cycles"
        if pending is not None:
            msg += f" (pending: {pending})"
        super().__init__(msg)
