# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/axil_bus/dv/test_axil_bus.py

"""Tests for axil_bus verification."""

from __future__ import annotations

import pyuvm

from axil.vip.shared.dv import (
    BaseCoverage,
    BaseDriver,
    BaseEnv,
    BaseItem,
    BaseMonitor,
    BaseRefModel,
    BaseResponder,
    BaseSb,
    BaseSbPredictor,
    BaseSequence,
    BaseTest,
    utils_dv,
)

from .axil_bus_coverage import AxilCoverage
from .axil_bus_driver import AxilMasterDriver
from .axil_bus_env import AxilEnv
from .axil_bus_item import AxilItem
from .axil_bus_monitor import AxilBusMonitor
from .axil_bus_ref_model import AxilRefModel
from .axil_bus_responder import AxilSlaveResponder
from .axil_bus_sb import AxilSb, AxilSbPredictor
from .axil_bus_sequence import (
    AxilRandomSequence,
    AxilSequence,
    AxilWriteReadSequence,
)


class AxilBaseTest(BaseTest):
    """Common overrides for the axil_bus tests.

    Subclasses pick the sequence. At check_phase the response tally must
    hold exactly as many writes and reads as the sequence issued.
    """

    sequence_type: type[BaseSequence] = AxilWriteReadSequence

    def set_factory_overrides(self) -> None:
        override_type_type = pyuvm.uvm_factory().set_type_override_by_type

        override_type_type(BaseCoverage, AxilCoverage)
        override_type_type(BaseDriver, AxilMasterDriver)
        override_type_type(BaseEnv, AxilEnv)
        override_type_type(BaseItem, AxilItem)
        override_type_type(BaseMonitor, AxilBusMonitor)
        override_type_type(BaseRefModel, AxilRefModel)
        override_type_type(BaseResponder, AxilSlaveResponder)
        override_type_type(BaseSb, AxilSb)
        override_type_type(BaseSbPredictor, AxilSbPredictor)
        override_type_type(BaseSequence, self.sequence_type)

    def expected_counts(self) -> tuple[int, int] | None:
        """(writes, reads) the tally must end with: the sequence's plan."""
        if not isinstance(self.seq, AxilSequence):
            return None
        writes = sum(1 for tr in self.seq.plan if tr.is_write)
        return (writes, len(self.seq.plan) - writes)

    def check_phase(self) -> None:
        self.logger.debug("check_phase begin")
        super().check_phase()
        expected = self.expected_counts()
        sb = self.env.sb
        if expected is not None and isinstance(sb, AxilSb):
            s = sb.summary
            if (s.writes, s.reads) != expected:
                raise AssertionError(
                    f"expected writes/reads {expected}, observed ({s.writes}, {s.reads})"
                )
        self.logger.debug("check_phase end")


@pyuvm.test()
class AxilWriteReadTest(AxilBaseTest):
    """write(0x10, 0xA5A5A5A5) then read(0x10): one write, one read, no errors."""

    sequence_type = AxilWriteReadSequence


@pyuvm.test()
class AxilRandomTest(AxilBaseTest):
    """AXIL_SEQ_REPS random write/read pairs inside the address window."""

    sequence_type = AxilRandomSequence


@pyuvm.test()
class AxilReadErrorTest(AxilBaseTest):
    """Random pairs against a slave that answers SLVERR for reads in the low
    quarter of the window. Every error read is counted once and the run
    still completes: the tally must hold exactly the planned error count
    and the comparator must see no mismatch.
    """

    sequence_type = AxilRandomSequence
    read_errors: tuple[int, ...] = tuple(range(0x00, 0x40))

    def build_config(self) -> None:
        super().build_config()
        utils_dv.uvm_config_db_set(self, "*", "slave_read_errors", self.read_errors)
        utils_dv.uvm_config_db_set(self, "*", "sb_fail_on_resp_error", False)

    def check_phase(self) -> None:
        super().check_phase()
        if not isinstance(self.seq, AxilSequence) or not isinstance(self.env.sb, AxilSb):
            return
        bad = set(self.read_errors)
        expected = sum(1 for tr in self.seq.plan if not tr.is_write and tr.address in bad)
        s = self.env.sb.summary
        if s.errors != expected:
            raise AssertionError(f"expected {expected} SLVERR read(s), tally saw {s.errors}")
        if s.passed != (expected == 0):
            raise AssertionError(f"verdict {s.verdict} with {s.errors} error(s)")
        if self.env.sb.cmp.err_cnt:
            raise AssertionError(f"comparator saw {self.env.sb.cmp.err_cnt} mismatch(es)")
