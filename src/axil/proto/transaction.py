# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/proto/transaction.py

"""Transaction record shared by the driver, the monitor and the scoreboard."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from enum import IntEnum
from typing import Any

MASK32 = 0xFFFF_FFFF
FULL_STRB = 0xF
MAX_PRE_DELAY = 5


class Resp(IntEnum):
    """AXI response codes (BRESP/RRESP)."""

    OKAY = 0
    EXOKAY = 1
    SLVERR = 2
    DECERR = 3


@dataclass
class Transaction:
    """One single-beat AXI4-Lite access.

    ``address``, ``is_write``, ``pre_delay`` and (for writes) ``data`` are set
    by whoever creates the request. ``response`` and, for reads, ``data`` are
    filled in when the access completes. The driver's copy and the monitor's
    copy of the same wire event are always distinct objects.
    """

    address: int = 0
    data: int = 0
    is_write: bool = False
    pre_delay: int = 0
    response: int | None = None

    def __post_init__(self) -> None:
        self.address &= MASK32
        self.data &= MASK32
        if self.pre_delay < 0:
            raise ValueError(f"pre_delay must be >= 0, got {self.pre_delay}")

    @classmethod
    def write(cls, address: int, data: int, pre_delay: int = 0) -> Transaction:
        """Build a write request."""
        return cls(address=address, data=data, is_write=True, pre_delay=pre_delay)

    @classmethod
    def read(cls, address: int, pre_delay: int = 0) -> Transaction:
        """Build a read request."""
        return cls(address=address, is_write=False, pre_delay=pre_delay)

    @property
    def done(self) -> bool:
        return self.response is not None

    @property
    def ok(self) -> bool:
        return self.response == Resp.OKAY

    @property
    def kind(self) -> str:
        return "write" if self.is_write else "read"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def __str__(self) -> str:
        d = self.to_dict()
        d["address"] = f"0x{self.address:08x}"
        d["data"] = f"0x{self.data:08x}"
        return json.dumps(d, sort_keys=True)
