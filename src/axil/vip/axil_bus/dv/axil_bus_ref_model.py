# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/axil_bus/dv/axil_bus_ref_model.py

"""axil_bus reference model (shadow memory).

* Writes (observed on the wires):
  - merge the written word into the shadow memory; nothing to compare.
* Reads:
  - expected data is the shadow word, or the sentinel for an address never
    written.
  - the response code is taken from the observed item. Error responses are
    counted by the predictor's tally, and their data is not checked.

Reset does not clear the shadow memory because the slave's store survives
reset too.
"""

from __future__ import annotations

from axil.proto import DEFAULT_SENTINEL, FULL_STRB, MASK32, SparseStore
from axil.vip.shared.dv import BaseRefModel, utils_cli

from .axil_bus_item import AxilItem


class AxilRefModel(BaseRefModel[AxilItem]):
    """Predicts read data from the observed write stream."""

    def __init__(self, name: str = "axil_ref_model") -> None:
        super().__init__(name)
        sentinel = utils_cli.get_int_setting("STORE_SENTINEL", DEFAULT_SENTINEL)
        self.shadow = SparseStore(sentinel)

    def set_sentinel(self, sentinel: int) -> None:
        self.shadow.sentinel = sentinel & MASK32

    def snapshot_state(self) -> dict[str, str]:
        return {f"0x{a:08x}": f"0x{d:08x}" for a, d in self.shadow.items()}

    def calc_exp(self, tr: AxilItem) -> AxilItem | None:
        if tr.is_write:
            self.shadow.write(tr.address, tr.data, FULL_STRB)
            return None
        if tr.response:
            self.logger.debug(
                "read 0x%08x resp=%d, data not checked", tr.address, tr.response
            )
            return tr
        tr.data = self.shadow.read(tr.address)
        return tr
