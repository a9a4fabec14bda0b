# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/shared/dv/base_responder.py

"""Reactive component that answers the bus on every clock edge."""

from __future__ import annotations

from typing import Any

import pyuvm

from . import utils_dv
from .base_clock_mixin import BaseClockMixin


class BaseResponder(BaseClockMixin, pyuvm.uvm_component):
    """Runs without a sequencer: sample, decide, drive, once per cycle.

    run_phase writes ``initial_dut_output_values`` at t=0, then loops:

        1. rising edge + ReadOnly
        2. ``respond(dut)`` returns the levels for the next cycle
        3. drive edge, ``drive_outputs`` writes those levels

    Subclasses implement ``respond``. Reset is seen through the sampled
    levels, so no reset sink link is needed.
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        utils_dv.configure_component_logger(self)
        self._clock_defaults()
        self.initial_dut_output_values: dict[str, int] = {}
        self.edge_count: int = 0

    def end_of_elaboration_phase(self) -> None:
        self.logger.debug("end_of_elaboration_phase begin")
        super().end_of_elaboration_phase()
        self.clock_setup()
        self.logger.debug("end_of_elaboration_phase end")

    async def run_phase(self) -> None:
        self.logger.debug("run_phase begin")
        utils_dv.drive_signals(self._dut, self.initial_dut_output_values)
        while True:
            await self.clock_sample_edge()
            outputs = self.respond(self._dut)
            self.edge_count += 1
            await self.clock_drive_edge()
            self.drive_outputs(outputs)

    def respond(self, dut: Any) -> dict[str, int]:
        raise NotImplementedError("Implement respond here")

    def drive_outputs(self, outputs: dict[str, int]) -> None:
        utils_dv.drive_signals(self._dut, outputs)
