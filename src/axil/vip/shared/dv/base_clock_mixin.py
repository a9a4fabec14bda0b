# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/shared/dv/base_clock_mixin.py

"""Sample and drive edges shared by every clocked component."""

from __future__ import annotations

from typing import Any, cast

import pyuvm
from cocotb.handle import SimHandleBase
from cocotb.triggers import FallingEdge, ReadOnly, RisingEdge

from . import utils_dv


class BaseClockMixin:
    """Gives a component the bench's two edges.

    ``clock_sample_edge`` is the rising edge followed by ReadOnly, and
    ``clock_drive_edge`` is the next falling edge. Whatever any component
    drives at the falling edge of cycle k-1 is what every component samples
    at rising edge k, so all of them step from the same snapshot.

    config_db: ``dut``, ``clock_name`` (default "clk"), ``clock_period_ps``.

    Call ``_clock_defaults`` from __init__ and ``clock_setup`` from
    end_of_elaboration_phase.

    Reference:
        C.E. Cummings, "Applying Stimulus & Sampling Outputs - UVM Verification
        Testing Techniques," SNUG 2016 (Austin)
    """

    def _clock_defaults(self, name: str = "clk", period_ps: int = 10_000) -> None:
        self.clock_name: str = name
        self.clock_period_ps: int = period_ps
        self._dut: Any | None = None
        self._clk: SimHandleBase | None = None

    def clock_setup(self) -> None:
        """Read the clock settings and bind ``dut`` and its clock handle."""
        comp = cast(pyuvm.uvm_component, self)
        name = utils_dv.uvm_config_db_get_try(comp, "clock_name")
        if isinstance(name, str) and name:
            self.clock_name = name
        period = utils_dv.uvm_config_db_get_try(comp, "clock_period_ps")
        if isinstance(period, int):
            self.clock_period_ps = period
        if self.clock_period_ps <= 0:
            raise ValueError(f"clock_period_ps must be > 0, got {self.clock_period_ps}")
        self._dut = utils_dv.uvm_config_db_get(comp, "dut")
        self._clk = utils_dv.get_signal(self._dut, self.clock_name)
        comp.logger.debug(
            "clock dut.%s period=%d ps", self.clock_name, self.clock_period_ps
        )

    def _clock_handle(self) -> SimHandleBase:
        if self._clk is None:
            raise RuntimeError("clock_setup() has not run")
        return self._clk

    async def clock_sample_edge(self) -> None:
        await RisingEdge(self._clock_handle())
        await ReadOnly()

    async def clock_drive_edge(self) -> None:
        await FallingEdge(self._clock_handle())
