# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/shared/dv/base_reset_monitor.py

"""Publishes reset level changes."""

from __future__ import annotations

from typing import Any

import pyuvm
from cocotb.handle import SimHandleBase
from cocotb.triggers import ReadOnly

from . import utils_dv
from .base_monitor import BaseMonitor
from .base_reset_driver import ResetConfig
from .base_reset_item import BaseResetItem


class BaseResetMonitor(BaseMonitor[BaseResetItem]):  # pylint: disable=too-many-ancestors
    """Writes one BaseResetItem for the level seen at t=0 and one per
    resolved change after that. X/Z levels are skipped.

    Subscribers only look at ``active``, so polarity stays in here.
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        self.cfg = ResetConfig()
        self._rst: SimHandleBase | None = None
        self._last_val: int | None = None

    def end_of_elaboration_phase(self) -> None:
        self.logger.debug("end_of_elaboration_phase begin")
        super().end_of_elaboration_phase()
        self.cfg = ResetConfig.from_config_db(self)
        self._rst = utils_dv.get_signal(self._dut, self.cfg.reset_name)
        self.logger.debug("end_of_elaboration_phase end")

    async def run_phase(self) -> None:
        self.logger.debug("run_phase begin")
        if self._rst is None:
            raise RuntimeError("run_phase before end_of_elaboration_phase")
        await ReadOnly()
        while True:
            self._publish_if_changed(self._rst)
            await self._rst.value_change
            await ReadOnly()

    def _publish_if_changed(self, rst: SimHandleBase) -> None:
        val = utils_dv.get_signal_value_int(rst.value)
        if val is None or val == self._last_val:
            return
        self._last_val = val
        tr = pyuvm.uvm_factory().create_object_by_type(BaseResetItem, name="tr")
        tr.value = val
        tr.active = self.cfg.is_active(val)
        self.item_count += 1
        self.logger.debug("dut.%s=%d active=%s", self.cfg.reset_name, val, tr.active)
        self.ap.write(tr)

    async def sample_dut(self, dut: Any) -> BaseResetItem | None:
        raise NotImplementedError("BaseResetMonitor publishes from run_phase")
