# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/axil_bus/dv/axil_bus_sequence.py

"""Write/read sequences for axil_bus verification."""

from __future__ import annotations

import random

from axil.proto import Transaction, fixed_write_read, random_write_read
from axil.proto.scenarios import DEFAULT_REPS, DEFAULT_WINDOW, RANDOM_DATA
from axil.vip.shared.dv import BaseSequence, utils_cli, utils_dv

from .axil_bus_item import AxilItem


class AxilSequence(BaseSequence[AxilItem]):
    """Plays a request list built by ``build_plan`` in order.

    The driver blocks each item until its response arrives, so the list is
    issued strictly one transaction at a time.
    """

    def __init__(self, name: str = "axil_seq", seq_len: int = 0) -> None:
        super().__init__(name, seq_len)
        self._me = self.__class__.__name__
        self.plan: list[Transaction] = []

    async def body_pre(self) -> None:
        self.logger.debug("%s body_pre begin", self._me)
        await super().body_pre()
        self.plan = self.build_plan()
        self.seq_len = len(self.plan)
        self.logger.debug("%s body_pre end (%d requests)", self._me, self.seq_len)

    def build_plan(self) -> list[Transaction]:
        raise NotImplementedError

    async def set_item_inputs(self, item: AxilItem, index: int) -> None:
        item.set_request(self.plan[index])


class AxilWriteReadSequence(AxilSequence):
    """write(0x10, 0xA5A5A5A5) then read(0x10), no delay."""

    def build_plan(self) -> list[Transaction]:
        return fixed_write_read()


class AxilRandomSequence(AxilSequence):
    """``reps`` pairs of (write 0xC0DEC0DE to a random address, read a random
    address), both inside [addr_low, addr_high].

    Settings (env > plusargs > default):
        AXIL_SEQ_REPS (int): default 5, ``seq_reps`` in config_db wins
        AXIL_ADDR_LOW / AXIL_ADDR_HIGH (int): default 0x0 / 0xFF
        AXIL_RAND_DELAY (bool): draw pre-delays in [0, 5], default off

    The draws come from a private generator seeded from ``random``, which
    cocotb seeds from the run seed, so a run replays with its seed.
    """

    def __init__(self, name: str = "axil_random_seq", seq_len: int = 0) -> None:
        super().__init__(name, seq_len)
        self.reps: int = utils_cli.get_int_setting("AXIL_SEQ_REPS", DEFAULT_REPS)
        self.addr_low: int = utils_cli.get_int_setting("AXIL_ADDR_LOW", DEFAULT_WINDOW[0])
        self.addr_high: int = utils_cli.get_int_setting(
            "AXIL_ADDR_HIGH", DEFAULT_WINDOW[1]
        )
        self.rand_delay: bool = utils_cli.get_bool_setting("AXIL_RAND_DELAY", False)

    async def body_pre(self) -> None:
        v = utils_dv.uvm_config_db_get_try(self.sequencer, "seq_reps")
        if isinstance(v, int):
            self.reps = v
        if self.reps < 0:
            raise ValueError(f"seq_reps must be >= 0, got {self.reps}")
        await super().body_pre()

    def build_plan(self) -> list[Transaction]:
        rng = random.Random(random.getrandbits(32))
        return random_write_read(
            self.reps,
            rng,
            low=self.addr_low,
            high=self.addr_high,
            data=RANDOM_DATA,
            randomize_delay=self.rand_delay,
        )
