# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/axil_bus/dv/axil_bus_sb.py

"""Scoreboard for axil_bus: response tally plus read-data comparison."""

from __future__ import annotations

import pyuvm

from axil.proto import Scoreboard, ScoreboardSummary
from axil.vip.shared.dv import BaseSb, BaseSbPredictor, utils_dv

from .axil_bus_item import AxilItem
from .axil_bus_ref_model import AxilRefModel


class AxilSbPredictor(BaseSbPredictor[AxilItem]):
    """Counts every observed transaction, then predicts read results.

    ``tally`` is owned here and updated only from ``write``. A read whose
    response code is nonzero is counted once, as a tally error; the
    comparator then checks only the data of reads answered OKAY.
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        self.tally = Scoreboard(name=name)

    def end_of_elaboration_phase(self) -> None:
        super().end_of_elaboration_phase()
        v = utils_dv.uvm_config_db_get_try(self, "store_sentinel")
        if isinstance(v, int) and isinstance(self.ref_model, AxilRefModel):
            self.ref_model.set_sentinel(v)

    def write(self, tt: AxilItem) -> None:
        self.tally.observe(tt)
        super().write(tt)


class AxilSb(BaseSb[AxilItem]):
    """Adds the end-of-run summary and the response-error verdict.

    The bench passes iff the tally saw no error responses and the comparator
    saw no mismatches. The summary line is always logged. Error responses
    never stop the run; at final_phase they fail the test when both
    ``sb_fail_on_error`` and ``sb_fail_on_resp_error`` (default True) are set.
    Tests that inject errors clear the latter and check the count themselves.
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        self.fail_on_error: bool = True
        self.fail_on_resp_error: bool = True

    def end_of_elaboration_phase(self) -> None:
        super().end_of_elaboration_phase()
        v = utils_dv.uvm_config_db_get_try(self, "sb_fail_on_error")
        if isinstance(v, bool):
            self.fail_on_error = v
        v = utils_dv.uvm_config_db_get_try(self, "sb_fail_on_resp_error")
        if isinstance(v, bool):
            self.fail_on_resp_error = v

    @property
    def summary(self) -> ScoreboardSummary:
        assert isinstance(self.prd, AxilSbPredictor)
        return self.prd.tally.summary()

    def report_phase(self) -> None:
        super().report_phase()
        s = self.summary
        self.logger.info(
            "summary: writes=%d reads=%d errors=%d verdict=%s",
            s.writes,
            s.reads,
            s.errors,
            s.verdict,
        )

    def final_phase(self) -> None:
        super().final_phase()
        s = self.summary
        if self.fail_on_error and self.fail_on_resp_error and not s.passed:
            raise AssertionError(f"{s.errors} read(s) returned an error response")
