# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/shared/dv/base_sb.py

"""Scoreboard: predictor plus comparator."""

from __future__ import annotations

from typing import Generic, TypeVar

import pyuvm

from . import utils_dv
from .base_item import BaseItem
from .base_sb_comparator import BaseSbComparator
from .base_sb_predictor import BaseSbPredictor

T = TypeVar("T", bound=BaseItem)


class BaseSb(pyuvm.uvm_scoreboard, Generic[T]):
    """Observed items -> ``prd`` -> expected items -> ``cmp.exp_fifo``;
    items to check -> ``cmp.out_fifo``.

    The env connects the monitor ports; this class only links the predictor
    to the comparator. Both children come from the factory.
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        utils_dv.configure_component_logger(self)
        create = pyuvm.uvm_factory().create_component_by_type
        parent_inst_path = self.get_full_name()
        self.prd: BaseSbPredictor[T] = create(
            BaseSbPredictor, parent_inst_path=parent_inst_path, name="prd", parent=self
        )
        self.cmp: BaseSbComparator[T] = create(
            BaseSbComparator,
            parent_inst_path=parent_inst_path,
            name="comparator",
            parent=self,
        )

    def connect_phase(self) -> None:
        self.logger.debug("connect_phase begin")
        super().connect_phase()
        self.prd.results_ap.connect(self.cmp.exp_fifo.analysis_export)
        self.logger.debug("connect_phase end")
