# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: tests/test_monitor.py

from __future__ import annotations

import logging

from conftest import in_reset, snap

from axil.proto import BusMonitorFsm, MonitorState, Resp, Transaction


def test_write_record_emitted_only_on_b_transfer():
    seen: list[Transaction] = []
    mon = BusMonitorFsm(on_record=seen.append)
    assert mon.step(snap(awvalid=1, awready=1, awaddr=0x10)) is None
    assert mon.step(snap(wvalid=1, wready=1, wdata=0xA5A5A5A5)) is None
    assert mon.step(snap()) is None
    assert mon.state is MonitorState.W_RESP
    assert seen == []

    rec = mon.step(snap(bvalid=1, bresp=Resp.OKAY))
    assert isinstance(rec, Transaction)
    assert (rec.is_write, rec.address, rec.data, rec.response) == (
        True,
        0x10,
        0xA5A5A5A5,
        Resp.OKAY,
    )
    assert seen == [rec]
    assert mon.state is MonitorState.IDLE


def test_w_on_aw_edge_is_captured():
    mon = BusMonitorFsm()
    mon.step(
        snap(awvalid=1, awready=1, awaddr=0x4, wvalid=1, wready=1, wdata=0x77)
    )
    rec = mon.step(snap(bvalid=1))
    assert rec.data == 0x77


def test_read_record():
    mon = BusMonitorFsm()
    assert mon.step(snap(arvalid=1, arready=1, araddr=0x40)) is None
    rec = mon.step(snap(rvalid=1, rdata=0xDEADBEEF, rresp=Resp.SLVERR))
    assert (rec.is_write, rec.address, rec.data, rec.response) == (
        False,
        0x40,
        0xDEADBEEF,
        Resp.SLVERR,
    )
    assert mon.count == 1


def test_reset_drops_partial_record():
    seen: list[Transaction] = []
    mon = BusMonitorFsm(on_record=seen.append)
    mon.step(snap(arvalid=1, arready=1, araddr=0x40))
    mon.step(in_reset())
    assert mon.state is MonitorState.IDLE
    assert mon.step(snap(rvalid=1, rdata=1)) is None
    assert seen == []


def test_handshake_without_ready_is_ignored():
    mon = BusMonitorFsm()
    mon.step(snap(awvalid=1, awaddr=0x10))
    assert mon.state is MonitorState.IDLE


def test_aw_and_ar_together_track_the_write(caplog):
    mon = BusMonitorFsm()
    with caplog.at_level(logging.WARNING, logger="axil.proto.monitor"):
        mon.step(snap(awvalid=1, awready=1, arvalid=1, arready=1))
    assert mon.state is MonitorState.W_DATA
    assert "not tracked" in caplog.text


def test_factory_builds_each_record():
    made = []

    def factory(**kw):
        made.append(kw)
        return kw

    mon = BusMonitorFsm(factory=factory)
    mon.step(snap(arvalid=1, arready=1, araddr=0x8))
    rec = mon.step(snap(rvalid=1, rdata=3))
    assert rec == {"address": 0x8, "data": 3, "is_write": False, "response": 0}
    assert made == [rec]


def test_valid_and_ready_on_different_edges_record_nothing():
    mon = BusMonitorFsm()
    mon.step(snap(arvalid=1, araddr=0x8))
    mon.step(snap(arready=1, araddr=0x8))
    assert mon.state is MonitorState.IDLE
    assert mon.count == 0
