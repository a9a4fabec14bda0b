# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: tests/test_slave.py

from __future__ import annotations

import logging

from conftest import in_reset, snap

from axil.proto import SLAVE_IDLE, Resp, SlaveResponderFsm, SlaveWriteState

READY = {"awready": 1, "wready": 1, "arready": 1}


def test_reset_drives_everything_low():
    slv = SlaveResponderFsm()
    assert slv.step(in_reset()) == SLAVE_IDLE


def test_always_ready_out_of_reset():
    slv = SlaveResponderFsm()
    out = slv.step(snap())
    assert {k: out[k] for k in READY} == READY
    assert out["bvalid"] == 0
    assert out["rvalid"] == 0


def test_write_path_stores_and_responds():
    slv = SlaveResponderFsm()
    slv.step(snap())
    slv.step(snap(awvalid=1, awaddr=0x10, **READY))
    assert slv.state is SlaveWriteState.AWAIT_WDATA
    out = slv.step(snap(wvalid=1, wdata=0xA5A5A5A5, wstrb=0xF, **READY))
    assert slv.state is SlaveWriteState.RESPOND_B
    assert out["bvalid"] == 1
    assert out["bresp"] == Resp.OKAY
    assert slv.store.read(0x10) == 0xA5A5A5A5
    out = slv.step(snap(bvalid=1, **READY))
    assert out["bvalid"] == 0
    assert slv.state is SlaveWriteState.IDLE
    assert slv.writes == 1


def test_aw_and_w_on_same_edge_complete_the_write():
    slv = SlaveResponderFsm()
    out = slv.step(snap(awvalid=1, awaddr=0x4, wvalid=1, wdata=0x1, wstrb=0xF, **READY))
    assert slv.dropped_wdata == 0
    assert slv.state is SlaveWriteState.RESPOND_B
    assert out["bvalid"] == 1
    assert slv.store.read(0x4) == 0x1


def test_second_aw_overwrites_pending_address(caplog):
    slv = SlaveResponderFsm()
    slv.step(snap(awvalid=1, awaddr=0x10, **READY))
    with caplog.at_level(logging.WARNING, logger="axil.proto.slave"):
        slv.step(snap(awvalid=1, awaddr=0x20, **READY))
    assert slv.overwritten_addr == 1
    assert slv.pending_addr == 0x20
    assert "overwritten" in caplog.text
    slv.step(snap(wvalid=1, wdata=0x77, wstrb=0xF, **READY))
    assert 0x10 not in slv.store
    assert slv.store.read(0x20) == 0x77


def test_w_without_address_is_dropped(caplog):
    slv = SlaveResponderFsm()
    with caplog.at_level(logging.WARNING, logger="axil.proto.slave"):
        out = slv.step(snap(wvalid=1, wdata=0x99, wstrb=0xF, **READY))
    assert slv.dropped_wdata == 1
    assert out["bvalid"] == 0
    assert len(slv.store) == 0
    assert "dropped" in caplog.text


def test_read_returns_store_word_or_sentinel():
    slv = SlaveResponderFsm()
    slv.store.write(0x30, 0x12345678)
    out = slv.step(snap(arvalid=1, araddr=0x30, **READY))
    assert (out["rvalid"], out["rdata"], out["rresp"]) == (1, 0x12345678, Resp.OKAY)
    out = slv.step(snap(rvalid=1, rdata=0x12345678, **READY))
    assert out["rvalid"] == 0
    out = slv.step(snap(arvalid=1, araddr=0x34, **READY))
    assert out["rdata"] == 0xDEADBEEF


def test_new_ar_on_r_transfer_edge_keeps_rvalid():
    slv = SlaveResponderFsm()
    slv.step(snap(arvalid=1, araddr=0x0, **READY))
    out = slv.step(snap(arvalid=1, araddr=0x4, rvalid=1, **READY))
    assert out["rvalid"] == 1
    assert slv.reads == 2


def test_reset_returns_to_idle_and_keeps_store():
    slv = SlaveResponderFsm()
    slv.step(snap(awvalid=1, awaddr=0x10, **READY))
    slv.step(snap(wvalid=1, wdata=0xCAFE, wstrb=0xF, **READY))
    assert slv.state is SlaveWriteState.RESPOND_B
    out = slv.step(in_reset())
    assert out == SLAVE_IDLE
    assert slv.state is SlaveWriteState.IDLE
    assert slv.pending_addr is None
    assert slv.store.read(0x10) == 0xCAFE
