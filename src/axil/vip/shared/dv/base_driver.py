# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/shared/dv/base_driver.py

"""Driver base: initial inputs, reset gating and the item loop."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

import pyuvm
from cocotb.triggers import Event, NextTimeStep, ReadWrite

from . import utils_dv
from .base_clock_mixin import BaseClockMixin
from .base_item import BaseItem

T = TypeVar("T", bound=BaseItem)


class BaseDriver(BaseClockMixin, pyuvm.uvm_driver, Generic[T]):
    """Pulls items from the sequencer and hands each to ``drive_item``.

    run_phase order:
        1. write ``initial_dut_input_values`` at time 0
        2. ``start_background()`` for drivers that run a per-edge task
        3. wait for reset to assert, then to deassert
        4. get_next_item -> drive_item -> item_done, forever

    Reset state arrives from the reset sink through ``reset_change`` and is
    kept as a pair of level events so waits never miss an edge.

    Subclasses implement ``drive_item(dut, tr)``.
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        utils_dv.configure_component_logger(self)
        self._clock_defaults()
        self.initial_dut_input_values: dict[str, int] = {}
        self._reset_active: bool = False
        self._rst_asserted: Event = Event()
        self._rst_deasserted: Event = Event()
        self._rst_deasserted.set()

    def end_of_elaboration_phase(self) -> None:
        self.logger.debug("end_of_elaboration_phase begin")
        super().end_of_elaboration_phase()
        self.clock_setup()
        self.logger.debug("end_of_elaboration_phase end")

    async def run_phase(self) -> None:
        self.logger.debug("run_phase begin")
        tr: T
        await self.apply_initial_dut_inputs()
        self.start_background()
        await self.wait_for_reset_active()
        await self.wait_for_reset_inactive()
        while True:
            tr = await self.seq_item_port.get_next_item()
            await self.drive_item(self._dut, tr)
            self.seq_item_port.item_done()

    async def apply_initial_dut_inputs(self) -> None:
        """Write the idle levels at t=0 and move one delta past them."""
        self.logger.debug("apply_initial_dut_inputs begin")
        utils_dv.drive_signals(self._dut, self.initial_dut_input_values)
        await ReadWrite()
        await NextTimeStep()
        self.logger.debug("apply_initial_dut_inputs end")

    def start_background(self) -> None:
        """Hook for per-edge tasks; the default driver has none."""

    async def wait_for_reset_active(self) -> None:
        self.logger.debug("wait_for_reset_active begin")
        await self._rst_asserted.wait()
        self.logger.debug("wait_for_reset_active end")

    async def wait_for_reset_inactive(self) -> None:
        self.logger.debug("wait_for_reset_inactive begin")
        await self._rst_deasserted.wait()
        self.logger.debug("wait_for_reset_inactive end")

    def reset_change(self, value: int, active: bool) -> None:
        """Called by the reset sink on every reset level change."""
        self._reset_active = active
        if active:
            self._rst_asserted.set()
            self._rst_deasserted.clear()
        else:
            self._rst_deasserted.set()
            self._rst_asserted.clear()
        self.logger.debug("reset_change: value=%d active=%s", value, active)

    async def drive_item(self, dut: Any, tr: T) -> None:
        raise NotImplementedError("Implement DUT signal driving here")
