# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/axil_bus/dv/axil_bus_env.py

"""Environment for axil_bus."""

from __future__ import annotations

from axil.vip.shared.dv import BaseEnv


class AxilEnv(BaseEnv):
    """One master agent facing one slave responder on the same wires.

    With ``responder_en`` off nothing answers the master, so the first
    transaction stalls until the test timeout fires.
    """

    num_agents: int = 1

    def end_of_elaboration_phase(self) -> None:
        self.logger.debug("end_of_elaboration_phase begin")
        super().end_of_elaboration_phase()
        if self.slv is None:
            self.logger.warning(
                "no slave responder on the bus; transactions will stall"
            )
        if self.sb is None:
            self.logger.warning("checking disabled; no verdict will be reported")
        self.logger.debug("end_of_elaboration_phase end")
