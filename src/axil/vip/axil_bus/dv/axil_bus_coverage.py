# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/axil_bus/dv/axil_bus_coverage.py

"""Coverage."""

from __future__ import annotations

import pyuvm
from cocotb_coverage.coverage import CoverCross, CoverPoint

from axil.vip.shared.dv import BaseCoverage

from .axil_bus_item import AxilItem


def addr_quartile(address: int) -> int:
    """Quarter of the 256-byte window the low address byte falls in."""
    return (address & 0xFF) >> 6


@CoverPoint(
    "axil.dir",
    xf=lambda direction, resp, quartile: direction,
    bins=["write", "read"],
)
@CoverPoint(
    "axil.resp",
    xf=lambda direction, resp, quartile: resp,
    bins=[0, 1, 2, 3],
)
@CoverPoint(
    "axil.addr_quartile",
    xf=lambda direction, resp, quartile: quartile,
    bins=[0, 1, 2, 3],
)
@CoverCross("axil.dir_x_resp", items=["axil.dir", "axil.resp"])
def axil_cover(direction: str, resp: int, quartile: int) -> None:
    pass


class AxilCoverage(BaseCoverage[AxilItem]):
    """Samples monitored transactions only, so every bin is wire-visible."""

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        self.total: int = 0
        self.writes: int = 0
        self.reads: int = 0
        self.error_resps: int = 0

    def sample(self, tt: AxilItem) -> None:
        self.total += 1
        if tt.is_write:
            self.writes += 1
        else:
            self.reads += 1
        resp = int(tt.response or 0)
        if resp:
            self.error_resps += 1
        axil_cover(tt.kind, resp, addr_quartile(tt.address))

    def report_phase(self) -> None:
        self.logger.debug("report_phase begin")
        super().report_phase()
        self.logger.info(
            "AxilCoverage summary: total=%d writes=%d reads=%d error_resps=%d",
            self.total,
            self.writes,
            self.reads,
            self.error_resps,
        )
        self.logger.debug("report_phase end")
