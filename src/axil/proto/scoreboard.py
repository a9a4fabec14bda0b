# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/proto/scoreboard.py

"""Transaction counters and the run verdict."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreboardSummary:
    """End-of-run counts. The run passes iff no read returned an error."""

    writes: int
    reads: int
    errors: int

    @property
    def passed(self) -> bool:
        return self.errors == 0

    @property
    def verdict(self) -> str:
        return "PASS" if self.passed else "FAIL"

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = asdict(self)
        d["verdict"] = self.verdict
        return d

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)


class Scoreboard:
    """Consumes monitor records; never talks to the driver or the slave.

    Writes are counted only. Reads are counted, and a nonzero response code is
    counted as an error and reported with its address and code.
    """

    def __init__(self, name: str = "scoreboard") -> None:
        self.name = name
        self.writes: int = 0
        self.reads: int = 0
        self.errors: int = 0

    def observe(self, rec: Any) -> None:
        """Account for one completed record (anything with ``is_write``,
        ``address`` and ``response``)."""
        if rec.is_write:
            self.writes += 1
            return
        self.reads += 1
        if rec.response:
            self.errors += 1
            logger.error(
                "%s: read error at address 0x%08x, response %d",
                self.name,
                rec.address,
                rec.response,
            )

    @property
    def passed(self) -> bool:
        return self.errors == 0

    def summary(self) -> ScoreboardSummary:
        return ScoreboardSummary(self.writes, self.reads, self.errors)
