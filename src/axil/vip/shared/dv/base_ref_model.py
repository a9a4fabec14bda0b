# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/shared/dv/base_ref_model.py

"""Reference model base."""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

import pyuvm

from . import utils_dv
from .base_item import BaseItem

T = TypeVar("T", bound=BaseItem)


class BaseRefModel(pyuvm.uvm_object, Generic[T]):
    """Golden model fed by the predictor.

    ``calc_exp(tr)`` fills the output fields of ``tr`` (already a clone) with
    what the design should have produced and returns it, or returns None when
    there is nothing to check for this item. ``reset_change`` is forwarded
    from the reset sink.

    Reference:
        C.E. Cummings, "OVM/UVM Scoreboards - Fundamental Architectures,"
        SNUG 2013
    """

    def __init__(self, name: str = "ref_model") -> None:
        super().__init__(name)
        self._logger: logging.Logger = logging.getLogger(f"uvm.obj.{name}")
        utils_dv.configure_non_component_logger(self._logger)
        self._reset_active: bool = False

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def reset_change(self, value: int, active: bool) -> None:
        self._reset_active = active
        self.logger.debug("reset_change: value=%d active=%s", value, active)

    def calc_exp(self, tr: T) -> T | None:
        raise NotImplementedError
