# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/shared/dv/base_reset_sink.py

"""Fans reset changes out to the driver and the scoreboard predictor."""

from __future__ import annotations

from typing import Generic, TypeVar

import pyuvm

from . import utils_dv
from .base_driver import BaseDriver
from .base_reset_item import BaseResetItem
from .base_sb_predictor import BaseSbPredictor

T = TypeVar("T", bound=BaseResetItem)


class BaseResetSink(pyuvm.uvm_subscriber, Generic[T]):
    """Subscribed to the reset monitor; the env fills in ``drv`` and
    ``sb_prd`` during connect_phase.

    A sink with no driver would leave the driver waiting for reset forever,
    so that is rejected at end of elaboration.
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        utils_dv.configure_component_logger(self)
        self.drv: BaseDriver | None = None
        self.sb_prd: BaseSbPredictor | None = None

    def end_of_elaboration_phase(self) -> None:
        self.logger.debug("end_of_elaboration_phase begin")
        super().end_of_elaboration_phase()
        if self.drv is None:
            raise utils_dv.ConfigKeyError(
                f"{self.get_full_name()}: no driver connected to the reset sink"
            )
        self.logger.debug("end_of_elaboration_phase end")

    def write(self, tt: T) -> None:
        if tt.value is None or tt.active is None:
            return
        if self.drv is not None:
            self.drv.reset_change(tt.value, tt.active)
        if self.sb_prd is not None:
            self.sb_prd.reset_change(tt.value, tt.active)
