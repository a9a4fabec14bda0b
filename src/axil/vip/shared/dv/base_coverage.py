# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/shared/dv/base_coverage.py

"""Functional coverage subscriber (cocotb-coverage + pyuvm)."""

from __future__ import annotations

import os
from typing import Generic, TypeVar

import pyuvm
from cocotb_coverage.coverage import coverage_db

from . import utils_dv
from .base_item import BaseItem

T = TypeVar("T", bound=BaseItem)


class BaseCoverage(pyuvm.uvm_subscriber, Generic[T]):
    """Calls ``sample(item)`` for every item written to ``analysis_export``.

    Subclasses implement ``sample`` and route it into functions decorated
    with cocotb-coverage ``CoverPoint``/``CoverCross``. ``coverage_en``
    (config_db) turns sampling off. The coverage database is reported at
    DEBUG in report_phase and exported to ``$COV_YAML`` when that is set.
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        utils_dv.configure_component_logger(self)
        self.yaml_path: str | None = os.getenv("COV_YAML")
        self._coverage_en: bool = True

    def end_of_elaboration_phase(self) -> None:
        self.logger.debug("end_of_elaboration_phase begin")
        super().end_of_elaboration_phase()
        cvrg = utils_dv.uvm_config_db_get_try(self, "coverage_en")
        if isinstance(cvrg, bool):
            self._coverage_en = cvrg
        self.logger.debug("end_of_elaboration_phase end")

    def write(self, tt: T) -> None:
        if self._coverage_en:
            self.sample(tt)

    def sample(self, tt: T) -> None:  # pragma: no cover - abstract hook
        raise NotImplementedError("Override in subclass and feed coverpoints")

    def report_phase(self) -> None:
        self.logger.debug("report_phase begin")
        super().report_phase()
        if not self._coverage_en:
            return
        coverage_db.report_coverage(self.logger.debug, bins=True)
        if self.yaml_path:
            coverage_db.export_to_yaml(self.yaml_path)
            self.logger.info("Coverage YAML written to %s", self.yaml_path)
        self.logger.debug("report_phase end")
