# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/proto/__init__.py

"""Simulator-free AXI4-Lite protocol engine.

Components, leaves first:
- bus: signal ownership table, per-edge BusSnapshot, AxilBus levels
- store: SparseStore with a sentinel for unmapped reads
- slave: SlaveResponderFsm (always-ready, one write tracked at a time),
  ErrorInjectingSlave
- master: MasterFsm (one transaction in flight, optional pre-delay)
- monitor: BusMonitorFsm (passive, snapshot-only)
- scoreboard: Scoreboard counters and verdict
- scenarios / constraints: request streams and constrained draws
- sim: CycleSim lock-step kernel with a cycle-budget watchdog

Nothing here imports cocotb or pyuvm; the bench in ``axil.vip`` wraps these
state machines.
"""

from __future__ import annotations

from .bus import (
    BUS_SIGNALS,
    MASTER_IDLE,
    MASTER_SIGNALS,
    SIGNALS,
    SLAVE_IDLE,
    SLAVE_SIGNALS,
    AxilBus,
    BusSnapshot,
    Role,
)
from .constraints import constrain_field, rand_addr_in_window, rand_delay, rand_in_range
from .errors import AxilError, BusOwnershipError, RandomizationError, SimulationTimeout
from .master import MasterFsm, MasterState
from .monitor import BusMonitorFsm, MonitorState
from .scenarios import SCENARIOS, fixed_write_read, random_write_read
from .scoreboard import Scoreboard, ScoreboardSummary
from .sim import CycleSim, Outcome, RunResult
from .slave import ErrorInjectingSlave, SlaveResponderFsm, SlaveWriteState
from .store import DEFAULT_SENTINEL, SparseStore
from .transaction import FULL_STRB, MASK32, MAX_PRE_DELAY, Resp, Transaction

__all__ = (
    "AxilBus",
    "AxilError",
    "BUS_SIGNALS",
    "BusMonitorFsm",
    "BusOwnershipError",
    "BusSnapshot",
    "CycleSim",
    "DEFAULT_SENTINEL",
    "ErrorInjectingSlave",
    "FULL_STRB",
    "MASK32",
    "MASTER_IDLE",
    "MASTER_SIGNALS",
    "MAX_PRE_DELAY",
    "MasterFsm",
    "MasterState",
    "MonitorState",
    "Outcome",
    "RandomizationError",
    "Resp",
    "Role",
    "RunResult",
    "SCENARIOS",
    "SIGNALS",
    "SLAVE_IDLE",
    "SLAVE_SIGNALS",
    "Scoreboard",
    "ScoreboardSummary",
    "SimulationTimeout",
    "SlaveResponderFsm",
    "SlaveWriteState",
    "SparseStore",
    "Transaction",
    "constrain_field",
    "fixed_write_read",
    "rand_addr_in_window",
    "rand_delay",
    "rand_in_range",
    "random_write_read",
)
