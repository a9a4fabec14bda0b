# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/proto/master.py

"""Single-outstanding AXI4-Lite master state machine."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from .bus import MASTER_IDLE, BusSnapshot
from .transaction import FULL_STRB, Transaction

logger = logging.getLogger(__name__)


class MasterState(Enum):
    IDLE = "IDLE"
    DELAY = "DELAY"
    AW = "AW"
    W = "W"
    B = "B"
    AR = "AR"
    R = "R"


class MasterFsm:
    """Drives one transaction at a time and waits for its response.

    ``start()`` loads a request; every ``step()`` consumes the snapshot for one
    rising edge and returns the master outputs for the next cycle:

    * DELAY: count down ``pre_delay`` edges, then raise AWVALID or ARVALID.
    * AW/AR: hold VALID until the edge where the transfer is sampled.
    * W: after AW, raise WVALID with all byte strobes enabled.
    * B/R: BREADY and RREADY are always high, so the response transfers on the
      first edge VALID is seen. The response (and read data) is captured into
      the request, which is then reported through ``on_complete``.

    There are no timeouts here. A responder that never answers stalls the
    machine; the caller owns the watchdog.

    While reset is asserted the outputs are forced idle. A request caught in
    flight restarts from its pre-delay once reset is released.
    """

    def __init__(
        self,
        on_complete: Callable[[Transaction], None] | None = None,
        name: str = "master",
    ) -> None:
        self.name = name
        self.on_complete = on_complete
        self.state: MasterState = MasterState.IDLE
        self.current: Transaction | None = None
        self._delay: int = 0
        self._out: dict[str, int] = dict(MASTER_IDLE)

    @property
    def busy(self) -> bool:
        return self.state is not MasterState.IDLE

    @property
    def outputs(self) -> dict[str, int]:
        return dict(self._out)

    def start(self, tr: Transaction) -> None:
        """Accept the next request. Only legal while idle."""
        if self.busy:
            raise RuntimeError(
                f"{self.name}: start() while {self.state.value} with {self.current}"
            )
        tr.response = None
        self.current = tr
        self._delay = tr.pre_delay
        self.state = MasterState.DELAY
        logger.debug("%s: start %s", self.name, tr)

    def step(self, snap: BusSnapshot) -> dict[str, int]:
        """Advance one edge from ``snap`` and return the next master outputs."""
        if snap.in_reset:
            self._out = dict(MASTER_IDLE)
            if self.current is not None and self.state is not MasterState.DELAY:
                logger.debug(
                    "%s: reset in %s, restarting %s",
                    self.name,
                    self.state.value,
                    self.current,
                )
                self.state = MasterState.DELAY
            if self.current is not None:
                self._delay = self.current.pre_delay
            return self.outputs

        handler = self._HANDLERS[self.state]
        handler(self, snap)
        return self.outputs

    def _idle(self, snap: BusSnapshot) -> None:  # pylint: disable=unused-argument
        pass

    def _delay_step(self, snap: BusSnapshot) -> None:  # pylint: disable=unused-argument
        if self._delay > 0:
            self._delay -= 1
            return
        tr = self.current
        assert tr is not None, "DELAY without a request"
        out = self._out
        if tr.is_write:
            out["awvalid"] = 1
            out["awaddr"] = tr.address
            out["awprot"] = 0
            self.state = MasterState.AW
        else:
            out["arvalid"] = 1
            out["araddr"] = tr.address
            out["arprot"] = 0
            self.state = MasterState.AR

    def _aw_step(self, snap: BusSnapshot) -> None:
        if not snap.aw.fire:
            return
        tr = self.current
        assert tr is not None
        out = self._out
        out["awvalid"] = 0
        out["wvalid"] = 1
        out["wdata"] = tr.data
        out["wstrb"] = FULL_STRB
        self.state = MasterState.W

    def _w_step(self, snap: BusSnapshot) -> None:
        if not snap.w.fire:
            return
        self._out["wvalid"] = 0
        self.state = MasterState.B

    def _b_step(self, snap: BusSnapshot) -> None:
        if not snap.b.fire:
            return
        tr = self.current
        assert tr is not None
        tr.response = snap.b.resp
        self._complete()

    def _ar_step(self, snap: BusSnapshot) -> None:
        if not snap.ar.fire:
            return
        self._out["arvalid"] = 0
        self.state = MasterState.R

    def _r_step(self, snap: BusSnapshot) -> None:
        if not snap.r.fire:
            return
        tr = self.current
        assert tr is not None
        tr.data = snap.r.data
        tr.response = snap.r.resp
        self._complete()

    def _complete(self) -> None:
        tr = self.current
        assert tr is not None
        self.current = None
        self.state = MasterState.IDLE
        logger.debug("%s: done %s", self.name, tr)
        if self.on_complete is not None:
            self.on_complete(tr)

    _HANDLERS: dict[MasterState, Callable[["MasterFsm", BusSnapshot], None]] = {
        MasterState.IDLE: _idle,
        MasterState.DELAY: _delay_step,
        MasterState.AW: _aw_step,
        MasterState.W: _w_step,
        MasterState.B: _b_step,
        MasterState.AR: _ar_step,
        MasterState.R: _r_step,
    }
