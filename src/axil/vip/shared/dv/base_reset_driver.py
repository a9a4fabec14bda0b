# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/shared/dv/base_reset_driver.py

"""Reset settings and the reset pulse generator."""

from __future__ import annotations

from dataclasses import dataclass, fields

import pyuvm
from cocotb.triggers import NextTimeStep, ReadWrite

from . import utils_dv
from .base_clock_mixin import BaseClockMixin


@dataclass
class ResetConfig:
    """Reset keys shared by the reset driver, the reset monitor and any
    component that samples the reset port itself."""

    reset_enable: bool = True
    reset_name: str = "rst_n"
    reset_active_low: bool = True
    reset_cycles: int = 5
    reset_settle_cycles: int = 2

    @classmethod
    def from_config_db(cls, comp: pyuvm.uvm_component) -> ResetConfig:
        cfg = cls()
        for f in fields(cls):
            v = utils_dv.uvm_config_db_get_try(comp, f.name)
            if type(v) is type(getattr(cfg, f.name)) and v != "":
                setattr(cfg, f.name, v)
        if cfg.reset_cycles < 0 or cfg.reset_settle_cycles < 0:
            raise ValueError(
                f"reset cycle counts must be >= 0, got {cfg.reset_cycles}"
                f"/{cfg.reset_settle_cycles}"
            )
        return cfg

    @property
    def active_level(self) -> int:
        return 0 if self.reset_active_low else 1

    def is_active(self, level: int) -> bool:
        return level == self.active_level


class BaseResetDriver(BaseClockMixin, pyuvm.uvm_component):
    """Holds reset from t=0 for ``reset_cycles`` drive edges, releases it,
    then idles ``reset_settle_cycles`` edges.

    Keys are those of :class:`ResetConfig`. With ``reset_enable`` False the
    HDL owns the reset and this component does nothing.

    Reference:
        https://github.com/advanced-uvm/second_edition/blob/master/recipes/3.rst_drv.sv
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        utils_dv.configure_component_logger(self)
        self._clock_defaults()
        self.cfg = ResetConfig()

    def end_of_elaboration_phase(self) -> None:
        self.logger.debug("end_of_elaboration_phase begin")
        super().end_of_elaboration_phase()
        self.clock_setup()
        self.cfg = ResetConfig.from_config_db(self)
        self.logger.debug("end_of_elaboration_phase end")

    async def run_phase(self) -> None:
        self.logger.debug("run_phase begin")
        if self.cfg.reset_enable:
            await self.pulse_reset()
        else:
            self.logger.info("dut.%s is driven by the HDL", self.cfg.reset_name)
        self.logger.debug("run_phase end")

    async def pulse_reset(self) -> None:
        rst = utils_dv.get_signal(self._dut, self.cfg.reset_name)
        rst.value = self.cfg.active_level
        await ReadWrite()
        await NextTimeStep()
        await self._idle_edges(self.cfg.reset_cycles)
        rst.value = 1 - self.cfg.active_level
        self.logger.debug("dut.%s released", self.cfg.reset_name)
        await self._idle_edges(self.cfg.reset_settle_cycles)

    async def _idle_edges(self, n: int) -> None:
        for _ in range(n):
            await self.clock_drive_edge()
