# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/shared/dv/__init__.py

"""UVM-style base layer (cocotb + pyuvm) shared by the bus benches.

Structure:
- BaseTest builds clock, reset and one BaseEnv
- BaseEnv builds agents, a BaseResponder, coverage, scoreboard and the
  reset monitor/sink pair
- BaseAgent holds BaseDriver, BaseSequencer and BaseMonitor

Every component is created through the pyuvm factory, so a bench only
subclasses what it needs and registers overrides in
``BaseTest.set_factory_overrides``. Settings are resolved by ``utils_cli``
and distributed through config_db by ``utils_dv``.
"""

from __future__ import annotations

from axil import __version__

from . import utils_cli, utils_dv
from .base_agent import BaseAgent
from .base_clock_driver import BaseClockDriver
from .base_clock_mixin import BaseClockMixin
from .base_coverage import BaseCoverage
from .base_driver import BaseDriver
from .base_env import BaseEnv
from .base_item import BaseItem
from .base_monitor import BaseMonitor
from .base_ref_model import BaseRefModel
from .base_reset_driver import BaseResetDriver, ResetConfig
from .base_reset_item import BaseResetItem
from .base_reset_monitor import BaseResetMonitor
from .base_reset_sink import BaseResetSink
from .base_responder import BaseResponder
from .base_sb import BaseSb
from .base_sb_comparator import BaseSbComparator
from .base_sb_predictor import BaseSbPredictor
from .base_sequence import BaseSequence
from .base_sequencer import BaseSequencer
from .base_test import TIMEOUT_MARKER, BaseTest

__all__ = (
    "BaseAgent",
    "BaseClockDriver",
    "BaseClockMixin",
    "BaseCoverage",
    "BaseDriver",
    "BaseEnv",
    "BaseItem",
    "BaseMonitor",
    "BaseRefModel",
    "BaseResetDriver",
    "BaseResetItem",
    "BaseResetMonitor",
    "BaseResetSink",
    "BaseResponder",
    "BaseSb",
    "BaseSbComparator",
    "BaseSbPredictor",
    "BaseSequence",
    "BaseSequencer",
    "BaseTest",
    "ResetConfig",
    "TIMEOUT_MARKER",
    "utils_cli",
    "utils_dv",
    "__version__",
)
