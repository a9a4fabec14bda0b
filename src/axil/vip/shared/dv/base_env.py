# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/shared/dv/base_env.py

"""Environment scaffold (UVM-style, factory-first)."""

from __future__ import annotations

import pyuvm

from . import utils_dv
from .base_agent import BaseAgent
from .base_coverage import BaseCoverage
from .base_reset_item import BaseResetItem
from .base_reset_monitor import BaseResetMonitor
from .base_reset_sink import BaseResetSink
from .base_responder import BaseResponder
from .base_sb import BaseSb


class BaseEnv(pyuvm.uvm_env):
    """Builds the agents, the bus responder and the checking components,
    then wires their analysis ports together.

    Components:
        agents: ``num_agents`` agents, each with driver, sequencer and monitor
        slv: responder playing the other end of the bus (``responder_en``)
        cov: coverage subscriber (``coverage_en``)
        sb: predictor plus comparator (``check_en``)
        mon_rst: reset monitor
        reset_sink: forwards reset changes to the driver and predictor

    Wiring, per agent:
        agent.ap     -> cov, sb.prd
        agent.ap_out -> sb.cmp.out_fifo
        mon_rst.ap   -> reset_sink

    All three enables default to True and are read from config_db.
    """

    num_agents: int = 1

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        utils_dv.configure_component_logger(self)
        self.agents: list[BaseAgent] = []
        self.slv: BaseResponder | None = None
        self.cov: BaseCoverage | None = None
        self.sb: BaseSb | None = None
        self.mon_rst: BaseResetMonitor
        self.reset_sink: BaseResetSink[BaseResetItem]

    def _enabled(self, key: str) -> bool:
        v = utils_dv.uvm_config_db_get_try(self, key)
        return v if isinstance(v, bool) else True

    def build_phase(self) -> None:
        self.logger.debug("build_phase begin")
        super().build_phase()

        create = pyuvm.uvm_factory().create_component_by_type
        parent_inst_path = self.get_full_name()

        for idx in range(self.num_agents):
            self.agents.append(
                create(
                    BaseAgent,
                    parent_inst_path=parent_inst_path,
                    name=f"agent{idx}",
                    parent=self,
                )
            )

        if self._enabled("responder_en"):
            self.slv = create(
                BaseResponder, parent_inst_path=parent_inst_path, name="slv", parent=self
            )
        if self._enabled("coverage_en"):
            self.cov = create(
                BaseCoverage,
                parent_inst_path=parent_inst_path,
                name="coverage",
                parent=self,
            )
        if self._enabled("check_en"):
            self.sb = create(
                BaseSb, parent_inst_path=parent_inst_path, name="sb", parent=self
            )

        self.mon_rst = create(
            BaseResetMonitor,
            parent_inst_path=parent_inst_path,
            name="mon_rst",
            parent=self,
        )
        self.reset_sink = create(
            BaseResetSink,
            parent_inst_path=parent_inst_path,
            name="reset_sink",
            parent=self,
        )
        self.logger.debug("build_phase end")

    def connect_phase(self) -> None:
        self.logger.debug("connect_phase begin")
        super().connect_phase()
        for agent in self.agents:
            if self.cov is not None:
                agent.ap.connect(self.cov.analysis_export)
            if self.sb is not None:
                agent.ap.connect(self.sb.prd.analysis_export)
                agent.ap_out.connect(self.sb.cmp.out_fifo.analysis_export)
            if agent.drv is not None:
                self.reset_sink.drv = agent.drv
        self.mon_rst.ap.connect(self.reset_sink.analysis_export)
        if self.sb is not None:
            self.reset_sink.sb_prd = self.sb.prd
        self.logger.debug("connect_phase end")
