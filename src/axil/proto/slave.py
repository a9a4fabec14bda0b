# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/proto/slave.py

"""Always-ready AXI4-Lite slave responder.

Write path::

    IDLE --AW--> AWAIT_WDATA --W (store write, bvalid=1)--> RESPOND_B --B--> IDLE

Read path is independent of the write state. An AR transfer looks up the
store and raises ``rvalid`` with the word (or the sentinel) on the next cycle.
An R transfer drops ``rvalid`` unless a new AR transfer happens on the same
edge.

Only one write is tracked at a time through a single pending-address register.
An AW transfer outside ``IDLE`` overwrites that register and is reported as a
warning; nothing is queued. The driver in this package never triggers it, a
pipelining master would.

Response codes come from :meth:`SlaveResponderFsm.write_response` and
:meth:`SlaveResponderFsm.read_response`, which always answer ``OKAY`` here.
:class:`ErrorInjectingSlave` overrides them for a chosen set of addresses.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable

from .bus import SLAVE_IDLE, BusSnapshot
from .store import SparseStore
from .transaction import Resp

logger = logging.getLogger(__name__)


class SlaveWriteState(Enum):
    IDLE = "IDLE"
    AWAIT_WDATA = "AWAIT_WDATA"
    RESPOND_B = "RESPOND_B"


class SlaveResponderFsm:  # pylint: disable=too-many-instance-attributes
    """Reactive slave stepped once per rising edge."""

    def __init__(self, store: SparseStore | None = None, name: str = "slave") -> None:
        self.name = name
        self.store: SparseStore = store if store is not None else SparseStore()
        self.state: SlaveWriteState = SlaveWriteState.IDLE
        self.pending_addr: int | None = None
        self._out: dict[str, int] = dict(SLAVE_IDLE)
        # debug counters
        self.writes: int = 0
        self.reads: int = 0
        self.dropped_wdata: int = 0
        self.overwritten_addr: int = 0

    @property
    def outputs(self) -> dict[str, int]:
        return dict(self._out)

    def reset(self) -> None:
        """Return to IDLE with all outputs low. The store is kept."""
        self.state = SlaveWriteState.IDLE
        self.pending_addr = None
        self._out = dict(SLAVE_IDLE)

    def write_response(self, address: int) -> int:  # pylint: disable=unused-argument
        """BRESP for a completed write to ``address``."""
        return Resp.OKAY

    def read_response(self, address: int) -> int:  # pylint: disable=unused-argument
        """RRESP for a read of ``address``."""
        return Resp.OKAY

    def step(self, snap: BusSnapshot) -> dict[str, int]:
        """Advance one edge from ``snap`` and return the next slave outputs."""
        if snap.in_reset:
            if self.state is not SlaveWriteState.IDLE:
                logger.debug("%s: reset in %s", self.name, self.state.value)
            self.reset()
            return self.outputs

        out = self._out
        out["awready"] = 1
        out["wready"] = 1
        out["arready"] = 1

        if snap.b.fire and self.state is SlaveWriteState.RESPOND_B:
            out["bvalid"] = 0
            self.state = SlaveWriteState.IDLE

        if snap.aw.fire:
            if self.state is not SlaveWriteState.IDLE:
                self.overwritten_addr += 1
                logger.warning(
                    "%s: AW 0x%08x accepted in %s, pending address 0x%08x overwritten",
                    self.name,
                    snap.aw.addr,
                    self.state.value,
                    self.pending_addr if self.pending_addr is not None else 0,
                )
            self.pending_addr = snap.aw.addr
            if self.state is SlaveWriteState.IDLE:
                self.state = SlaveWriteState.AWAIT_WDATA

        if snap.w.fire:
            if self.state is SlaveWriteState.AWAIT_WDATA and self.pending_addr is not None:
                addr = self.pending_addr
                self.store.write(addr, snap.w.data, snap.w.strb)
                self.writes += 1
                out["bvalid"] = 1
                out["bresp"] = int(self.write_response(addr))
                self.state = SlaveWriteState.RESPOND_B
            else:
                self.dropped_wdata += 1
                logger.warning(
                    "%s: W 0x%08x in %s has no pending address, dropped",
                    self.name,
                    snap.w.data,
                    self.state.value,
                )

        if snap.r.fire:
            out["rvalid"] = 0
        if snap.ar.fire:
            addr = snap.ar.addr
            out["rvalid"] = 1
            out["rdata"] = self.store.read(addr)
            out["rresp"] = int(self.read_response(addr))
            self.reads += 1
            logger.debug(
                "%s: AR 0x%08x -> 0x%08x", self.name, addr, out["rdata"]
            )

        return self.outputs


class ErrorInjectingSlave(SlaveResponderFsm):
    """Slave that answers ``resp`` (SLVERR by default) for chosen addresses.

    Writes still update the store; only the response code changes.
    """

    def __init__(
        self,
        read_errors: Iterable[int] = (),
        write_errors: Iterable[int] = (),
        store: SparseStore | None = None,
        name: str = "slave",
        resp: int = Resp.SLVERR,
    ) -> None:
        super().__init__(store, name)
        self.read_errors: frozenset[int] = frozenset(read_errors)
        self.write_errors: frozenset[int] = frozenset(write_errors)
        self.resp = resp

    def write_response(self, address: int) -> int:
        return self.resp if address in self.write_errors else Resp.OKAY

    def read_response(self, address: int) -> int:
        return self.resp if address in self.read_errors else Resp.OKAY
