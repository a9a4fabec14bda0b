# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/axil_bus/dv/axil_bus_responder.py

"""Slave responder for axil_bus."""

from __future__ import annotations

from typing import Any

import pyuvm

from axil.proto import (
    DEFAULT_SENTINEL,
    ErrorInjectingSlave,
    SLAVE_IDLE,
    Role,
    SlaveResponderFsm,
    SparseStore,
)
from axil.vip.shared.dv import BaseResponder, utils_cli, utils_dv

from .axil_bus_if import AxilBusIf


class AxilSlaveResponder(BaseResponder):  # pylint: disable=too-many-ancestors
    """Always-ready slave backed by a sparse store.

    The unmapped-read sentinel comes from config_db ``store_sentinel``, else
    ``STORE_SENTINEL``/``AXIL_STORE_SENTINEL``, else 0xDEADBEEF. A non-empty
    ``slave_read_errors`` address list in config_db answers SLVERR for reads
    of those addresses. Override ``make_fsm`` for other slave variants.
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        self.initial_dut_output_values = dict(SLAVE_IDLE)
        self.sentinel: int = DEFAULT_SENTINEL
        self.fsm: SlaveResponderFsm
        self._bus: AxilBusIf | None = None

    def end_of_elaboration_phase(self) -> None:
        super().end_of_elaboration_phase()
        v = utils_dv.uvm_config_db_get_try(self, "store_sentinel")
        if isinstance(v, int):
            self.sentinel = v
        else:
            self.sentinel = utils_cli.get_int_setting("STORE_SENTINEL", self.sentinel)
        self.fsm = self.make_fsm(SparseStore(self.sentinel))
        self._bus = AxilBusIf.from_component(self)
        self.logger.debug("sentinel 0x%08x", self.sentinel)

    def make_fsm(self, store: SparseStore) -> SlaveResponderFsm:
        bad = utils_dv.uvm_config_db_get_try(self, "slave_read_errors")
        if bad:
            self.logger.info("SLVERR for reads of %d address(es)", len(bad))
            return ErrorInjectingSlave(read_errors=bad, store=store, name=self.get_name())
        return SlaveResponderFsm(store, name=self.get_name())

    def respond(self, dut: Any) -> dict[str, int]:
        assert self._bus is not None
        return self.fsm.step(self._bus.snapshot())

    def drive_outputs(self, outputs: dict[str, int]) -> None:
        assert self._bus is not None
        self._bus.drive(Role.SLAVE, outputs)

    def report_phase(self) -> None:
        super().report_phase()
        self.logger.info(
            "slave: writes=%d reads=%d dropped_wdata=%d overwritten_addr=%d",
            self.fsm.writes,
            self.fsm.reads,
            self.fsm.dropped_wdata,
            self.fsm.overwritten_addr,
        )
