# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/axil_bus/dv/axil_bus_driver.py

"""Master driver for axil_bus."""

from __future__ import annotations

from typing import Any

import cocotb
import pyuvm
from cocotb.triggers import Event

from axil.proto import MASTER_IDLE, MasterFsm, Role, Transaction
from axil.vip.shared.dv import BaseDriver

from .axil_bus_if import AxilBusIf
from .axil_bus_item import AxilItem


class AxilMasterDriver(BaseDriver[AxilItem]):  # pylint: disable=too-many-ancestors
    """Runs :class:`MasterFsm` against the DUT ports.

    A background task steps the machine on every rising edge (ReadOnly) and
    drives its outputs on the following drive edge, including while reset
    is asserted, so the valids are held low and the ready signals high.

    ``drive_item`` loads one request into the machine and blocks until the
    machine reports it complete, which paces the sequence one transaction at
    a time. The response and read data are copied back into the item.
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        self.initial_dut_input_values = dict(MASTER_IDLE)
        self.fsm = MasterFsm(on_complete=self._on_complete, name=name)
        self._done: Event = Event()
        self._bus: AxilBusIf | None = None
        self._edge_task: Any = None

    def end_of_elaboration_phase(self) -> None:
        super().end_of_elaboration_phase()
        self._bus = AxilBusIf.from_component(self)

    def start_background(self) -> None:
        self._edge_task = cocotb.start_soon(self._edge_loop())

    async def _edge_loop(self) -> None:
        assert self._bus is not None
        while True:
            await self.clock_sample_edge()
            outputs = self.fsm.step(self._bus.snapshot())
            await self.clock_drive_edge()
            self._bus.drive(Role.MASTER, outputs)

    def _on_complete(self, tr: Transaction) -> None:
        self._done.set()

    async def drive_item(self, dut: Any, tr: AxilItem) -> None:
        req = tr.to_transaction()
        self._done.clear()
        self.fsm.start(req)
        await self._done.wait()
        tr.data = req.data
        tr.response = req.response
        self.logger.debug("%s complete: %s", tr.kind, tr)
