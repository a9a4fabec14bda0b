# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/shared/dv/base_sb_comparator.py

"""In-order comparator over two analysis FIFOs."""

from __future__ import annotations

from typing import Generic, TypeVar

import pyuvm

from . import utils_dv
from .base_item import BaseItem

T = TypeVar("T", bound=BaseItem)


class BaseSbComparator(pyuvm.uvm_component, Generic[T]):
    """Pairs expected items (``exp_fifo``) with actual items (``out_fifo``)
    in arrival order and compares their output fields.

    Configuration (config_db):
        sb_fail_on_error (bool): raise in final_phase on any mismatch,
            default True
        sb_error_quit_count (int): raise as soon as this many mismatches
            are seen, 0 disables, default 1

    Reference:
        C.E. Cummings, "OVM/UVM Scoreboards - Fundamental Architectures,"
        SNUG 2013 (Silicon Valley)
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component) -> None:
        super().__init__(name, parent)
        utils_dv.configure_component_logger(self)
        self.exp_fifo: pyuvm.uvm_tlm_analysis_fifo[T] = pyuvm.uvm_tlm_analysis_fifo(
            f"{name}.exp_fifo", self
        )
        self.out_fifo: pyuvm.uvm_tlm_analysis_fifo[T] = pyuvm.uvm_tlm_analysis_fifo(
            f"{name}.out_fifo", self
        )
        self.vect_cnt: int = 0
        self.pass_cnt: int = 0
        self.err_cnt: int = 0
        self.fail_on_error: bool = True
        self.error_quit_count: int = 1

    def end_of_elaboration_phase(self) -> None:
        self.logger.debug("end_of_elaboration_phase begin")
        super().end_of_elaboration_phase()
        f = utils_dv.uvm_config_db_get_try(self, "sb_fail_on_error")
        if isinstance(f, bool):
            self.fail_on_error = f
        q = utils_dv.uvm_config_db_get_try(self, "sb_error_quit_count")
        if isinstance(q, int) and q >= 0:
            self.error_quit_count = q
        self.logger.debug("end_of_elaboration_phase end")

    async def run_phase(self) -> None:
        self.logger.debug("run_phase begin")
        while True:
            exp: T = await self.exp_fifo.get()
            act: T = await self.out_fifo.get()
            self.check(exp, act)

    def check(self, exp: T, act: T) -> bool:
        self.vect_cnt += 1
        diff = act.diff_out(exp)
        if not diff and type(act) is type(exp):
            self.pass_cnt += 1
            self.logger.debug("PASS #%d act=%s", self.vect_cnt, act)
            return True
        self.err_cnt += 1
        self.logger.error("MISMATCH exp=%s act=%s diff=%s", exp, act, diff)
        if (
            self.fail_on_error
            and self.error_quit_count
            and self.err_cnt >= self.error_quit_count
        ):
            raise AssertionError(
                f"Scoreboard error_quit_count reached "
                f"(errors={self.err_cnt}, threshold={self.error_quit_count})"
            )
        return False

    def report_phase(self) -> None:
        self.logger.debug("report_phase begin")
        if self.err_cnt == 0:
            self.logger.info(
                "*** TEST PASSED - %d compared, %d passed ***",
                self.vect_cnt,
                self.pass_cnt,
            )
        else:
            self.logger.error(
                "*** TEST FAILED - %d compared, %d passed, %d failed ***",
                self.vect_cnt,
                self.pass_cnt,
                self.err_cnt,
            )
        self.logger.debug("report_phase end")

    def final_phase(self) -> None:
        if self.fail_on_error and self.err_cnt > 0:
            raise AssertionError(
                f"Scoreboard saw {self.err_cnt} mismatch(es); sb_fail_on_error is set"
            )
