# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/shared/dv/base_monitor.py

"""Passive monitor base with two analysis ports."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

import pyuvm

from . import utils_dv
from .base_clock_mixin import BaseClockMixin
from .base_item import BaseItem

T = TypeVar("T", bound=BaseItem)


class BaseMonitor(BaseClockMixin, pyuvm.uvm_monitor, Generic[T]):
    """Publishes every observed item on ``ap``; items accepted by
    ``select_out`` are also published on ``ap_out``.

    ``ap`` feeds coverage and the scoreboard predictor, ``ap_out`` feeds the
    scoreboard comparator. ``sample_dut`` returns None on edges that complete
    nothing.

    Subclasses implement ``sample_dut(dut)`` and may override ``select_out``.
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        utils_dv.configure_component_logger(self)
        self._clock_defaults()
        self.ap: pyuvm.uvm_analysis_port
        self.ap_out: pyuvm.uvm_analysis_port
        self.item_count: int = 0

    def build_phase(self) -> None:
        self.logger.debug("build_phase begin")
        super().build_phase()
        self.ap = pyuvm.uvm_analysis_port("ap", self)
        self.ap_out = pyuvm.uvm_analysis_port("ap_out", self)
        self.logger.debug("build_phase end")

    def end_of_elaboration_phase(self) -> None:
        self.logger.debug("end_of_elaboration_phase begin")
        super().end_of_elaboration_phase()
        self.clock_setup()
        self.logger.debug("end_of_elaboration_phase end")

    async def run_phase(self) -> None:
        self.logger.debug("run_phase begin")
        tr: T | None
        while True:
            tr = await self.sample_dut(self._dut)
            if tr is None:
                continue
            self.ap.write(tr)
            if self.select_out(tr):
                self.ap_out.write(tr)

    def select_out(self, tr: T) -> bool:  # pylint: disable=unused-argument
        return True

    async def sample_dut(self, dut: Any) -> T | None:
        raise NotImplementedError("Implement sample_dut here")
