# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/shared/dv/base_sb_predictor.py

"""Predictor: observed item -> reference model -> expected item."""

from __future__ import annotations

from typing import Generic, TypeVar

import pyuvm

from . import utils_dv
from .base_item import BaseItem
from .base_ref_model import BaseRefModel

T = TypeVar("T", bound=BaseItem)


class BaseSbPredictor(pyuvm.uvm_subscriber, Generic[T]):
    """Clones each received item, lets the reference model fill in the
    expected outputs and publishes the result on ``results_ap``.

    Broadcast items are never modified. Items for which the model returns
    None are not published.
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        utils_dv.configure_component_logger(self)
        self.results_ap: pyuvm.uvm_analysis_port[T] = pyuvm.uvm_analysis_port(
            f"{name}.results_ap", self
        )
        self.ref_model: BaseRefModel[T] = pyuvm.uvm_factory().create_object_by_type(
            BaseRefModel, name=f"{name}.ref_model"
        )

    def reset_change(self, value: int, active: bool) -> None:
        self.ref_model.reset_change(value, active)

    def write(self, tt: T) -> None:
        exp = self.ref_model.calc_exp(tt.clone())
        if exp is not None:
            self.results_ap.write(exp)
