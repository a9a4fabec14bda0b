# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: tests/test_bus.py

from __future__ import annotations

import pytest

from axil.proto import (
    BUS_SIGNALS,
    MASTER_SIGNALS,
    SLAVE_SIGNALS,
    AxilBus,
    BusOwnershipError,
    BusSnapshot,
    Role,
)


def test_every_signal_has_one_owner():
    assert set(MASTER_SIGNALS).isdisjoint(SLAVE_SIGNALS)
    assert "rst_n" not in BUS_SIGNALS
    assert {"bready", "rready", "wstrb"} <= set(MASTER_SIGNALS)
    assert {"awready", "bresp", "rdata"} <= set(SLAVE_SIGNALS)


def test_new_bus_starts_in_reset_with_idle_levels():
    bus = AxilBus()
    s = bus.snapshot()
    assert s.in_reset
    assert bus.level("bready") == 1
    assert bus.level("rready") == 1
    assert bus.level("awready") == 0
    assert s.transfers() == ()


@pytest.mark.parametrize(
    "role,signal",
    [
        (Role.MASTER, "awready"),
        (Role.MASTER, "rdata"),
        (Role.SLAVE, "awvalid"),
        (Role.SLAVE, "bready"),
        (Role.MASTER, "rst_n"),
    ],
)
def test_driving_foreign_signal_is_rejected(role, signal):
    bus = AxilBus()
    before = bus.levels()
    with pytest.raises(BusOwnershipError):
        bus.drive(role, {signal: 1})
    assert bus.levels() == before


def test_unknown_signal_is_rejected():
    with pytest.raises(KeyError):
        AxilBus().drive(Role.MASTER, {"awlen": 1})


def test_values_are_masked_to_width():
    bus = AxilBus()
    bus.drive(Role.MASTER, {"awaddr": (1 << 33) | 0x5, "wstrb": 0x1F, "awvalid": 3})
    bus.drive(Role.SLAVE, {"bresp": 7})
    assert bus.level("awaddr") == 0x5
    assert bus.level("wstrb") == 0xF
    assert bus.level("awvalid") == 1
    assert bus.level("bresp") == 3


def test_unknown_levels_read_as_zero():
    s = BusSnapshot.from_levels({"rst_n": 1, "awvalid": None, "awready": 1})
    assert not s.aw.valid
    assert s.aw.ready
    assert not s.aw.fire
    assert s.r.data == 0


def test_transfer_needs_valid_and_ready_in_same_snapshot():
    s = BusSnapshot.from_levels(
        {"rst_n": 1, "awvalid": 1, "awready": 1, "wvalid": 1, "arready": 1}
    )
    assert s.transfers() == ("aw",)
