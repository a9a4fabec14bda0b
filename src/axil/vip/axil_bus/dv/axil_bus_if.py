# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/axil_bus/dv/axil_bus_if.py

"""Moves levels between the axil_bus ports and the protocol engine."""

from __future__ import annotations

from typing import Any, Mapping

import pyuvm

from axil.proto import BUS_SIGNALS, SIGNALS, BusOwnershipError, BusSnapshot, Role
from axil.vip.shared.dv import ResetConfig, utils_dv


class AxilBusIf:
    """Samples every bus port into a :class:`BusSnapshot` and drives one
    role's outputs back onto the ports.

    The reset level is normalized to active low before it reaches the
    snapshot, so the state machines never see the bench's polarity.
    """

    def __init__(
        self, dut: Any, reset_name: str = "rst_n", reset_active_low: bool = True
    ) -> None:
        self.dut = dut
        self.reset_name = reset_name
        self.reset_active_low = reset_active_low
        for name in (*BUS_SIGNALS, reset_name):
            utils_dv.get_signal(dut, name)

    @classmethod
    def from_component(cls, comp: pyuvm.uvm_component) -> AxilBusIf:
        """Bind to ``dut`` using the component's reset settings in config_db."""
        cfg = ResetConfig.from_config_db(comp)
        return cls(
            utils_dv.uvm_config_db_get(comp, "dut"),
            reset_name=cfg.reset_name,
            reset_active_low=cfg.reset_active_low,
        )

    def snapshot(self) -> BusSnapshot:
        """Call from the ReadOnly region after the sampling edge."""
        levels = utils_dv.sample_signals(self.dut, BUS_SIGNALS)
        rst = utils_dv.sample_signals(self.dut, (self.reset_name,))[self.reset_name]
        if rst is None:
            levels["rst_n"] = 0
        elif self.reset_active_low:
            levels["rst_n"] = rst
        else:
            levels["rst_n"] = 0 if rst else 1
        return BusSnapshot.from_levels(levels)

    def drive(self, role: Role, outputs: Mapping[str, int]) -> None:
        for name in outputs:
            owner = SIGNALS[name][0]
            if owner is not role:
                raise BusOwnershipError(
                    f"{role.value} may not drive {name!r} (owned by {owner.value})"
                )
        utils_dv.drive_signals(self.dut, outputs)
