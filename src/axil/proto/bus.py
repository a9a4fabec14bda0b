# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/proto/bus.py

"""Bus channel model: signal ownership, per-edge snapshots and signal levels.

The bus is pure wiring between exactly one master and one slave. It holds the
current level of every signal and nothing else. Components never read each
other's state; they read a frozen :class:`BusSnapshot` taken just before a
rising edge and return the levels they want to drive for the next cycle.

Signal table (owner, width):

    ======== ====== =====   ======== ====== =====
    awvalid  master 1       arvalid  master 1
    awaddr   master 32      araddr   master 32
    awprot   master 3       arprot   master 3
    awready  slave  1       arready  slave  1
    wvalid   master 1       rvalid   slave  1
    wdata    master 32      rdata    slave  32
    wstrb    master 4       rresp    slave  2
    wready   slave  1       rready   master 1
    bvalid   slave  1       rst_n    env    1
    bresp    slave  2
    bready   master 1
    ======== ====== =====   ======== ====== =====

A transfer on a channel happens at an edge iff ``valid`` and ``ready`` are
both high in the snapshot for that edge.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from .errors import BusOwnershipError

logger = logging.getLogger(__name__)


class Role(str, Enum):
    """Who is allowed to drive a signal."""

    MASTER = "master"
    SLAVE = "slave"
    ENV = "env"


SIGNALS: dict[str, tuple[Role, int]] = {
    # write address
    "awvalid": (Role.MASTER, 1),
    "awaddr": (Role.MASTER, 32),
    "awprot": (Role.MASTER, 3),
    "awready": (Role.SLAVE, 1),
    # write data
    "wvalid": (Role.MASTER, 1),
    "wdata": (Role.MASTER, 32),
    "wstrb": (Role.MASTER, 4),
    "wready": (Role.SLAVE, 1),
    # write response
    "bvalid": (Role.SLAVE, 1),
    "bresp": (Role.SLAVE, 2),
    "bready": (Role.MASTER, 1),
    # read address
    "arvalid": (Role.MASTER, 1),
    "araddr": (Role.MASTER, 32),
    "arprot": (Role.MASTER, 3),
    "arready": (Role.SLAVE, 1),
    # read data
    "rvalid": (Role.SLAVE, 1),
    "rdata": (Role.SLAVE, 32),
    "rresp": (Role.SLAVE, 2),
    "rready": (Role.MASTER, 1),
    # environment
    "rst_n": (Role.ENV, 1),
}

MASTER_SIGNALS = tuple(n for n, (r, _) in SIGNALS.items() if r is Role.MASTER)
SLAVE_SIGNALS = tuple(n for n, (r, _) in SIGNALS.items() if r is Role.SLAVE)
BUS_SIGNALS = MASTER_SIGNALS + SLAVE_SIGNALS

# Levels the master holds in reset and between transactions.
MASTER_IDLE: dict[str, int] = {n: 0 for n in MASTER_SIGNALS} | {
    "bready": 1,
    "rready": 1,
}
# Levels the slave holds in reset.
SLAVE_IDLE: dict[str, int] = {n: 0 for n in SLAVE_SIGNALS}


def _mask(name: str, value: int) -> int:
    width = SIGNALS[name][1]
    return int(value) & ((1 << width) - 1)


@dataclass(frozen=True)
class AddrChannel:
    """AW or AR channel levels."""

    valid: bool
    ready: bool
    addr: int
    prot: int

    @property
    def fire(self) -> bool:
        return self.valid and self.ready


@dataclass(frozen=True)
class WriteDataChannel:
    """W channel levels."""

    valid: bool
    ready: bool
    data: int
    strb: int

    @property
    def fire(self) -> bool:
        return self.valid and self.ready


@dataclass(frozen=True)
class WriteRespChannel:
    """B channel levels."""

    valid: bool
    ready: bool
    resp: int

    @property
    def fire(self) -> bool:
        return self.valid and self.ready


@dataclass(frozen=True)
class ReadDataChannel:
    """R channel levels."""

    valid: bool
    ready: bool
    data: int
    resp: int

    @property
    def fire(self) -> bool:
        return self.valid and self.ready


@dataclass(frozen=True)
class BusSnapshot:
    """Immutable view of every bus signal just before one rising edge."""

    aw: AddrChannel
    w: WriteDataChannel
    b: WriteRespChannel
    ar: AddrChannel
    r: ReadDataChannel
    rst_n: bool

    @property
    def in_reset(self) -> bool:
        return not self.rst_n

    @classmethod
    def from_levels(cls, levels: Mapping[str, int | None]) -> BusSnapshot:
        """Build a snapshot from raw levels. Missing or unresolvable (X/Z)
        levels read as 0."""

        def lvl(name: str) -> int:
            v = levels.get(name)
            return 0 if v is None else _mask(name, v)

        return cls(
            aw=AddrChannel(
                bool(lvl("awvalid")), bool(lvl("awready")), lvl("awaddr"), lvl("awprot")
            ),
            w=WriteDataChannel(
                bool(lvl("wvalid")), bool(lvl("wready")), lvl("wdata"), lvl("wstrb")
            ),
            b=WriteRespChannel(bool(lvl("bvalid")), bool(lvl("bready")), lvl("bresp")),
            ar=AddrChannel(
                bool(lvl("arvalid")), bool(lvl("arready")), lvl("araddr"), lvl("arprot")
            ),
            r=ReadDataChannel(
                bool(lvl("rvalid")), bool(lvl("rready")), lvl("rdata"), lvl("rresp")
            ),
            rst_n=bool(lvl("rst_n")),
        )

    def transfers(self) -> tuple[str, ...]:
        """Names of the channels that transfer at this edge."""
        chans = (("aw", self.aw), ("w", self.w), ("b", self.b))
        chans += (("ar", self.ar), ("r", self.r))
        return tuple(name for name, ch in chans if ch.fire)


class AxilBus:
    """Current signal levels of one master/slave AXI4-Lite link.

    The bus starts with reset asserted and both roles at their idle levels.
    """

    def __init__(self) -> None:
        self._levels: dict[str, int] = {name: 0 for name in SIGNALS}
        self._levels.update(MASTER_IDLE)
        self._levels.update(SLAVE_IDLE)

    def drive(self, role: Role, outputs: Mapping[str, int]) -> None:
        """Apply ``outputs`` on behalf of ``role``."""
        for name, value in outputs.items():
            if name not in SIGNALS:
                raise KeyError(f"unknown bus signal {name!r}")
            owner = SIGNALS[name][0]
            if owner is not role:
                raise BusOwnershipError(
                    f"{role.value} may not drive {name!r} (owned by {owner.value})"
                )
            self._levels[name] = _mask(name, value)

    def level(self, name: str) -> int:
        return self._levels[name]

    def levels(self) -> dict[str, int]:
        return dict(self._levels)

    def snapshot(self) -> BusSnapshot:
        return BusSnapshot.from_levels(self._levels)
