# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/shared/dv/base_test.py

"""Base test scaffold (factory-friendly config + env creation)."""

from __future__ import annotations

import logging
import os

import cocotb
import pyuvm
from cocotb.triggers import SimTimeoutError, Timer, with_timeout
from pyuvm import ConfigDB

from axil.utils import TIMEOUT_MARKER

from . import utils_cli, utils_dv
from .base_clock_driver import BaseClockDriver
from .base_env import BaseEnv
from .base_reset_driver import BaseResetDriver
from .base_sequence import BaseSequence


class BaseTest(pyuvm.uvm_test):
    """Standard UVM test: configuration, factory overrides, clock, reset
    and environment.

    Subclasses must implement ``set_factory_overrides``. ``build_config``,
    ``build_clocks``, ``build_resets`` and ``build_envs`` may be overridden
    to change what gets built.

    Settings (env > plusargs > default, see ``utils_cli``):
        Clock: CLOCK_ENABLE, CLOCK_NAME, CLOCK_PERIOD_PS, CLOCK_START_HIGH,
               CLOCK_INIT_DELAY_PS
        Reset: RESET_ENABLE, RESET_NAME, RESET_ACTIVE_LOW, RESET_CYCLES,
               RESET_SETTLE_CYCLES
        Env:   CHECK_EN, COVERAGE_EN, RESPONDER_EN, SB_FAIL_ON_ERROR,
               SB_ERROR_QUIT_COUNT
        Test:  DRAIN_TIME_PS, TEST_TIMEOUT_NS

    A positive TEST_TIMEOUT_NS bounds the main sequence. When it expires
    the test logs ``TIMEOUT_MARKER`` and fails, so the runner can tell a
    hang from a mismatch.
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        utils_dv.configure_component_logger(self)
        self.clock_driver: BaseClockDriver
        self.reset_driver: BaseResetDriver
        self.env: BaseEnv
        self.seq: BaseSequence | None = None
        self.timeout_ns: int = 0

    def build_phase(self) -> None:
        self.logger.debug("build_phase begin")
        self.publish_dut()
        self.set_factory_overrides()
        utils_cli.apply_factory_overrides_from_plusargs(self.logger)
        super().build_phase()
        self.build_config()
        self.build_clocks()
        self.build_resets()
        self.build_envs()
        self.logger.debug("build_phase end")

    def end_of_elaboration_phase(self) -> None:
        self.logger.debug("end_of_elaboration_phase begin")
        super().end_of_elaboration_phase()
        self.set_logging_level_hier(utils_dv.desired_log_level())
        self.logger.debug("end_of_elaboration_phase end")

    def start_of_simulation_phase(self) -> None:
        self.logger.debug("start_of_simulation_phase begin")
        super().start_of_simulation_phase()
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug("printing uvm_config_db")
            print(ConfigDB())
            self.logger.debug("printing factory")
            pyuvm.uvm_factory().print(debug_level=1)
        self._log_run_seed()
        self.logger.debug("start_of_simulation_phase end")

    async def run_phase(self) -> None:
        self.logger.debug("run_phase begin")
        self.raise_objection()
        self.seq = pyuvm.uvm_factory().create_object_by_type(BaseSequence, name="seq")
        await self.run_bounded(self.seq.start(self.env.agents[0].sqr))
        await self.drain()
        self.drop_objection()
        self.logger.debug("run_phase end")

    async def run_bounded(self, coro) -> None:
        """Await ``coro``, failing the test if it outlives ``timeout_ns``."""
        if self.timeout_ns <= 0:
            await coro
            return
        try:
            await with_timeout(coro, self.timeout_ns, "ns")
        except SimTimeoutError:
            self.logger.error(
                "%s sequence still running after %d ns", TIMEOUT_MARKER, self.timeout_ns
            )
            raise

    def publish_dut(self) -> None:
        """Publish DUT via config_db."""
        utils_dv.uvm_config_db_set(self, "*", "dut", cocotb.top)

    def set_factory_overrides(self) -> None:
        """Override in subclasses to set uvm_factory() overrides."""
        raise NotImplementedError("Implement set_factory_overrides here")

    def build_config(self) -> None:
        drain_time_ps = utils_cli.get_int_setting("DRAIN_TIME_PS", 10_000)
        if drain_time_ps > 0:
            utils_dv.uvm_config_db_set(self, "", "drain_time_ps", drain_time_ps)
            utils_dv.uvm_config_db_set(self, "*", "drain_time_ps", drain_time_ps)
        self.timeout_ns = utils_cli.get_int_setting("TEST_TIMEOUT_NS", 0)

    def build_clocks(self) -> None:
        """Single clock; bench-level defaults are placed under *."""
        utils_dv.uvm_config_db_set(
            self, "*", "clock_enable", utils_cli.get_bool_setting("CLOCK_ENABLE", True)
        )
        utils_dv.uvm_config_db_set(
            self, "*", "clock_name", utils_cli.get_str_setting("CLOCK_NAME", "clk")
        )
        utils_dv.uvm_config_db_set(
            self,
            "*",
            "clock_period_ps",
            utils_cli.get_int_setting("CLOCK_PERIOD_PS", 10_000),
        )
        utils_dv.uvm_config_db_set(
            self,
            "*",
            "clock_start_high",
            utils_cli.get_bool_setting("CLOCK_START_HIGH", False),
        )
        utils_dv.uvm_config_db_set(
            self,
            "*",
            "clock_init_delay_ps",
            utils_cli.get_int_setting("CLOCK_INIT_DELAY_PS", 0),
        )
        self.clock_driver = pyuvm.uvm_factory().create_component_by_type(
            BaseClockDriver,
            parent_inst_path=self.get_full_name(),
            name="clock_driver",
            parent=self,
        )

    def build_resets(self) -> None:
        """Single reset, active low by default."""
        settings = {
            "reset_enable": utils_cli.get_bool_setting("RESET_ENABLE", True),
            "reset_name": utils_cli.get_str_setting("RESET_NAME", "rst_n"),
            "reset_active_low": utils_cli.get_bool_setting("RESET_ACTIVE_LOW", True),
            "reset_cycles": utils_cli.get_int_setting("RESET_CYCLES", 5),
            "reset_settle_cycles": utils_cli.get_int_setting("RESET_SETTLE_CYCLES", 2),
        }
        for key, value in settings.items():
            utils_dv.uvm_config_db_set(self, "*", key, value)
        self.reset_driver = pyuvm.uvm_factory().create_component_by_type(
            BaseResetDriver,
            parent_inst_path=self.get_full_name(),
            name="reset_driver",
            parent=self,
        )

    def build_envs(self) -> None:
        settings = {
            "check_en": utils_cli.get_bool_setting("CHECK_EN", True),
            "coverage_en": utils_cli.get_bool_setting("COVERAGE_EN", True),
            "responder_en": utils_cli.get_bool_setting("RESPONDER_EN", True),
            "sb_fail_on_error": utils_cli.get_bool_setting("SB_FAIL_ON_ERROR", True),
            "sb_error_quit_count": utils_cli.get_int_setting("SB_ERROR_QUIT_COUNT", 1),
        }
        for key, value in settings.items():
            utils_dv.uvm_config_db_set(self, "env*", key, value)
        self.env = pyuvm.uvm_factory().create_component_by_type(
            BaseEnv, parent_inst_path=self.get_full_name(), name="env", parent=self
        )

    def _log_run_seed(self) -> None:
        seed = os.getenv("COCOTB_RANDOM_SEED") or os.getenv("RANDOM_SEED")
        self.logger.debug("Run seed: %s", seed or "(unset)")

    async def drain(self, time_ps: int | None = None) -> None:
        """Wait ``drain_time_ps`` of simulation time so in-flight items
        reach the scoreboard. pyuvm has no set_drain_time()."""
        dt = utils_dv.uvm_config_db_get_try(self, "drain_time_ps")
        if time_ps is None and isinstance(dt, int) and dt > 0:
            time_ps = dt
        if time_ps is not None:
            n = max(0, int(time_ps))
            self.logger.debug("drain: %s ps", format(n, "_d"))
            await Timer(n, unit="ps")
