# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/axil_bus/dv/axil_bus_monitor.py

"""Passive monitor for axil_bus."""

from __future__ import annotations

from typing import Any

import pyuvm

from axil.proto import BusMonitorFsm
from axil.vip.shared.dv import BaseMonitor

from .axil_bus_if import AxilBusIf
from .axil_bus_item import AxilItem


class AxilBusMonitor(BaseMonitor[AxilItem]):  # pylint: disable=too-many-ancestors
    """Feeds one snapshot per rising edge to :class:`BusMonitorFsm`.

    Every completed transaction goes out on ``ap``; reads also go out on
    ``ap_out`` for the data comparison. Only wire levels are used, so this
    monitor would track any single-outstanding master.
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        self.fsm = BusMonitorFsm(factory=self._make_item, name=name)
        self._bus: AxilBusIf | None = None

    def end_of_elaboration_phase(self) -> None:
        super().end_of_elaboration_phase()
        self._bus = AxilBusIf.from_component(self)

    def _make_item(self, **fields: Any) -> AxilItem:
        item = AxilItem.observed(f"item{self.item_count}", **fields)
        self.item_count += 1
        return item

    async def sample_dut(self, dut: Any) -> AxilItem | None:
        assert self._bus is not None
        await self.clock_sample_edge()
        item = self.fsm.step(self._bus.snapshot())
        if item is not None:
            self.logger.debug("observed %s %s", item.kind, item)
        return item

    def select_out(self, tr: AxilItem) -> bool:
        return not tr.is_write
