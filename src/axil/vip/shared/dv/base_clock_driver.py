# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/shared/dv/base_clock_driver.py

"""Clock generator component."""

from __future__ import annotations

from typing import cast

import cocotb
import pyuvm
from cocotb.clock import Clock
from cocotb.handle import LogicObject
from cocotb.task import Task
from cocotb.triggers import Timer

from . import utils_dv
from .base_clock_mixin import BaseClockMixin


class BaseClockDriver(BaseClockMixin, pyuvm.uvm_component):
    """Toggles ``dut.<clock_name>`` from start_of_simulation until final_phase.

    config_db, besides the mixin's keys:
        clock_enable (bool): False when the HDL makes its own clock
        clock_start_high (bool): first half period high
        clock_init_delay_ps (int): idle time before the first edge
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        utils_dv.configure_component_logger(self)
        self._clock_defaults()
        self.settings: dict[str, bool | int] = {
            "clock_enable": True,
            "clock_start_high": False,
            "clock_init_delay_ps": 0,
        }
        self._tasks: list[Task] = []

    def end_of_elaboration_phase(self) -> None:
        self.logger.debug("end_of_elaboration_phase begin")
        super().end_of_elaboration_phase()
        self.clock_setup()
        for key, default in self.settings.items():
            v = utils_dv.uvm_config_db_get_try(self, key)
            if type(v) is type(default):
                self.settings[key] = v
        if int(self.settings["clock_init_delay_ps"]) < 0:
            raise ValueError(
                f"clock_init_delay_ps must be >= 0, got {self.settings['clock_init_delay_ps']}"
            )
        self.logger.debug("end_of_elaboration_phase end")

    def start_of_simulation_phase(self) -> None:
        self.logger.debug("start_of_simulation_phase begin")
        super().start_of_simulation_phase()
        if self.settings["clock_enable"]:
            self._tasks.append(cocotb.start_soon(self._run()))
        else:
            self.logger.info("dut.%s is driven by the HDL", self.clock_name)
        self.logger.debug("start_of_simulation_phase end")

    def final_phase(self) -> None:
        self.logger.debug("final_phase begin")
        for task in self._tasks:
            if not task.done():
                task.cancel()
        self._tasks.clear()
        super().final_phase()
        self.logger.debug("final_phase end")

    async def _run(self) -> None:
        delay = int(self.settings["clock_init_delay_ps"])
        if delay:
            await Timer(delay, unit="ps")
        clk = cast(LogicObject, self._clock_handle())
        clock = Clock(clk, self.clock_period_ps, unit="ps")
        self.logger.debug(
            "dut.%s toggling, period=%d ps start_high=%s",
            self.clock_name,
            self.clock_period_ps,
            self.settings["clock_start_high"],
        )
        start_high = bool(self.settings["clock_start_high"])
        self._tasks.append(cocotb.start_soon(clock.start(start_high=start_high)))
