# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/proto/monitor.py

"""Passive monitor that rebuilds transactions from channel transfers only."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable

from .bus import BusSnapshot
from .transaction import Transaction

logger = logging.getLogger(__name__)

RecordFactory = Callable[..., Any]


class MonitorState(Enum):
    IDLE = "IDLE"
    W_DATA = "W_DATA"
    W_RESP = "W_RESP"
    R_DATA = "R_DATA"


class BusMonitorFsm:
    """Tracks one transaction at a time from the snapshot, never drives.

    A write starts on an AW transfer, picks up data on the next W transfer (the
    same edge counts) and completes on the B transfer. A read starts on an AR
    transfer and completes on the R transfer. The single-outstanding
    assumption is deliberate: with a pipelining slave, data and response
    phases would be attributed to the wrong address.

    Completed records are built by ``factory(address=, data=, is_write=,
    response=)`` so every record is a fresh object owned by the monitor.
    """

    def __init__(
        self,
        factory: RecordFactory = Transaction,
        on_record: Callable[[Any], None] | None = None,
        name: str = "monitor",
    ) -> None:
        self.name = name
        self.factory = factory
        self.on_record = on_record
        self.state: MonitorState = MonitorState.IDLE
        self.count: int = 0
        self._addr: int = 0
        self._data: int = 0

    def reset(self) -> None:
        self.state = MonitorState.IDLE
        self._addr = 0
        self._data = 0

    def step(self, snap: BusSnapshot) -> Any | None:
        """Consume one edge; return the completed record, if any."""
        if snap.in_reset:
            if self.state is not MonitorState.IDLE:
                logger.debug(
                    "%s: reset drops partial %s at 0x%08x",
                    self.name,
                    self.state.value,
                    self._addr,
                )
            self.reset()
            return None

        if self.state is MonitorState.IDLE:
            if snap.aw.fire:
                if snap.ar.fire:
                    logger.warning(
                        "%s: AW 0x%08x and AR 0x%08x on the same edge, "
                        "read start not tracked",
                        self.name,
                        snap.aw.addr,
                        snap.ar.addr,
                    )
                self._addr = snap.aw.addr
                self.state = MonitorState.W_DATA
            elif snap.ar.fire:
                self._addr = snap.ar.addr
                self.state = MonitorState.R_DATA
                return None
            else:
                return None

        if self.state is MonitorState.W_DATA:
            if snap.w.fire:
                self._data = snap.w.data
                self.state = MonitorState.W_RESP
            return None

        if self.state is MonitorState.W_RESP:
            if snap.b.fire:
                return self._emit(True, self._data, snap.b.resp)
            return None

        if snap.r.fire:
            return self._emit(False, snap.r.data, snap.r.resp)
        return None

    def _emit(self, is_write: bool, data: int, resp: int) -> Any:
        rec = self.factory(
            address=self._addr, data=data, is_write=is_write, response=resp
        )
        self.count += 1
        self.reset()
        logger.debug("%s: observed %s", self.name, rec)
        if self.on_record is not None:
            self.on_record(rec)
        return rec
