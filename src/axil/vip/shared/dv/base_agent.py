# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/shared/dv/base_agent.py

"""Agent: sequencer, driver and monitor for one bus interface."""

from __future__ import annotations

import pyuvm

from . import utils_dv
from .base_driver import BaseDriver
from .base_monitor import BaseMonitor
from .base_sequencer import BaseSequencer


class BaseAgent(pyuvm.uvm_agent):
    """Active agents build ``drv`` and ``sqr``; every agent builds ``mon``.

    The monitor's two ports are re-exported as ``ap`` (every observed item)
    and ``ap_out`` (items the monitor selects for comparison).

    Reference:
        https://github.com/paradigm-works/uvmtb_template/blob/main/tb_agent.svh
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        utils_dv.configure_component_logger(self)
        self.ap: pyuvm.uvm_analysis_port
        self.ap_out: pyuvm.uvm_analysis_port
        self.drv: BaseDriver | None = None
        self.sqr: BaseSequencer | None = None
        self.mon: BaseMonitor

    def build_phase(self) -> None:
        self.logger.debug("build_phase begin")
        super().build_phase()
        create = pyuvm.uvm_factory().create_component_by_type
        parent_inst_path = self.get_full_name()
        if self.is_active == pyuvm.uvm_active_passive_enum.UVM_ACTIVE:
            self.drv = create(
                BaseDriver, parent_inst_path=parent_inst_path, name="drv", parent=self
            )
            self.sqr = create(
                BaseSequencer, parent_inst_path=parent_inst_path, name="sqr", parent=self
            )
        self.mon = create(
            BaseMonitor, parent_inst_path=parent_inst_path, name="mon", parent=self
        )
        self.ap = pyuvm.uvm_analysis_port("ap", self)
        self.ap_out = pyuvm.uvm_analysis_port("ap_out", self)
        self.logger.debug("build_phase end")

    def connect_phase(self) -> None:
        self.logger.debug("connect_phase begin")
        super().connect_phase()
        if self.drv is not None and self.sqr is not None:
            self.drv.seq_item_port.connect(self.sqr.seq_item_export)
        self.mon.ap.connect(self.ap)
        self.mon.ap_out.connect(self.ap_out)
        self.logger.debug("connect_phase end")
