# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/proto/sim.py

"""Lock-step cycle kernel for running the engine without an HDL simulator.

Every :meth:`CycleSim.tick` is one rising edge: take a snapshot, step the
master, the slave and the monitor from that same snapshot, then commit the
master and slave outputs. Nothing a component drives is visible to any
component until the next tick.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from .bus import AxilBus, BusSnapshot, Role
from .errors import SimulationTimeout
from .master import MasterFsm
from .monitor import BusMonitorFsm
from .scoreboard import Scoreboard, ScoreboardSummary
from .slave import SlaveResponderFsm
from .store import SparseStore
from .transaction import Transaction

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    PASS = "PASS"
    FAIL = "FAIL"
    TIMEOUT = "TIMEOUT"


@dataclass
class RunResult:
    """What a run produced."""

    outcome: Outcome
    summary: ScoreboardSummary
    cycles: int
    driven: list[Transaction] = field(default_factory=list)
    observed: list[Transaction] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "outcome": self.outcome.value,
            "cycles": self.cycles,
            **self.summary.to_dict(),
        }


class CycleSim:  # pylint: disable=too-many-instance-attributes
    """Owns one bus, slave, master, monitor and scoreboard.

    ``max_cycles`` bounds the whole run; exceeding it raises
    :class:`SimulationTimeout`, which :meth:`run` reports as a TIMEOUT outcome.
    """

    def __init__(
        self,
        slave: SlaveResponderFsm | None = None,
        *,
        store: SparseStore | None = None,
        reset_cycles: int = 2,
        max_cycles: int = 100_000,
    ) -> None:
        if reset_cycles < 0:
            raise ValueError("reset_cycles must be >= 0")
        if max_cycles <= 0:
            raise ValueError("max_cycles must be > 0")
        self.bus = AxilBus()
        self.slave = slave if slave is not None else SlaveResponderFsm(store)
        self.master = MasterFsm()
        self.scoreboard = Scoreboard()
        self.observed: list[Transaction] = []
        self.monitor = BusMonitorFsm(on_record=self._on_record)
        self.reset_cycles = reset_cycles
        self.max_cycles = max_cycles
        self.cycle: int = 0
        self.trace: list[BusSnapshot] | None = None

    def _on_record(self, rec: Transaction) -> None:
        self.observed.append(rec)
        self.scoreboard.observe(rec)

    def tick(self) -> BusSnapshot:
        """Advance one rising edge and return the snapshot it sampled."""
        if self.cycle >= self.max_cycles:
            raise SimulationTimeout(self.cycle, self.master.current)
        snap = self.bus.snapshot()
        if self.trace is not None:
            self.trace.append(snap)
        m_out = self.master.step(snap)
        s_out = self.slave.step(snap)
        self.monitor.step(snap)
        self.bus.drive(Role.MASTER, m_out)
        self.bus.drive(Role.SLAVE, s_out)
        self.cycle += 1
        return snap

    def set_reset(self, asserted: bool) -> None:
        self.bus.drive(Role.ENV, {"rst_n": 0 if asserted else 1})

    def reset(self, cycles: int | None = None) -> None:
        """Hold reset for ``cycles`` edges, then release it."""
        n = self.reset_cycles if cycles is None else cycles
        self.set_reset(True)
        for _ in range(n):
            self.tick()
        self.set_reset(False)
        logger.debug("reset released at cycle %d", self.cycle)

    def execute(self, tr: Transaction) -> Transaction:
        """Issue ``tr`` and tick until the master reports it complete."""
        self.master.start(tr)
        while self.master.busy:
            self.tick()
        return tr

    def run(self, requests: Iterable[Transaction]) -> RunResult:
        """Reset, then issue ``requests`` one at a time."""
        driven: list[Transaction] = []
        outcome: Outcome
        try:
            self.reset()
            for tr in requests:
                driven.append(self.execute(tr))
            # let the bus settle back to idle
            self.tick()
        except SimulationTimeout as exc:
            logger.error("*** TIMEOUT - %s ***", exc)
            outcome = Outcome.TIMEOUT
        else:
            outcome = Outcome.PASS if self.scoreboard.passed else Outcome.FAIL
        summary = self.scoreboard.summary()
        logger.info(
            "summary: writes=%d reads=%d errors=%d cycles=%d",
            summary.writes,
            summary.reads,
            summary.errors,
            self.cycle,
        )
        return RunResult(
            outcome=outcome,
            summary=summary,
            cycles=self.cycle,
            driven=driven,
            observed=list(self.observed),
        )
