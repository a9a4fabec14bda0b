# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: tests/test_master.py

from __future__ import annotations

import gc
import logging
import weakref

import pytest
from conftest import in_reset, snap

from axil.proto import MASTER_IDLE, MasterFsm, MasterState, Resp, Transaction


def steps_until(m: MasterFsm, signal: str, limit: int = 20) -> int:
    for n in range(1, limit + 1):
        if m.step(snap())[signal]:
            return n
    raise AssertionError(f"{signal} never raised")


@pytest.mark.parametrize("delay", [0, 1, 5])
def test_pre_delay_postpones_address_phase(delay):
    m = MasterFsm()
    m.start(Transaction.read(0x8, pre_delay=delay))
    assert steps_until(m, "arvalid") == delay + 1
    assert m.state is MasterState.AR


def test_write_walks_aw_w_b():
    done: list[Transaction] = []
    m = MasterFsm(on_complete=done.append)
    tr = Transaction.write(0x10, 0xA5A5A5A5)
    m.start(tr)
    out = m.step(snap())
    assert (out["awvalid"], out["awaddr"]) == (1, 0x10)

    # held until the slave is ready
    out = m.step(snap(awvalid=1))
    assert out["awvalid"] == 1
    assert m.state is MasterState.AW

    out = m.step(snap(awvalid=1, awready=1))
    assert out["awvalid"] == 0
    assert (out["wvalid"], out["wdata"], out["wstrb"]) == (1, 0xA5A5A5A5, 0xF)

    out = m.step(snap(wvalid=1, wready=1))
    assert out["wvalid"] == 0
    assert m.state is MasterState.B
    assert not tr.done

    m.step(snap(bvalid=1, bresp=Resp.SLVERR))
    assert tr.response == Resp.SLVERR
    assert done == [tr]
    assert not m.busy


def test_read_captures_data_and_response():
    done: list[Transaction] = []
    m = MasterFsm(on_complete=done.append)
    tr = Transaction.read(0x20)
    m.start(tr)
    m.step(snap())
    out = m.step(snap(arvalid=1, arready=1))
    assert out["arvalid"] == 0
    assert out["rready"] == 1
    m.step(snap(rvalid=1, rdata=0x55AA55AA, rresp=Resp.OKAY))
    assert tr.done and tr.ok
    assert tr.data == 0x55AA55AA
    assert done == [tr]


def test_start_while_busy_is_an_error():
    m = MasterFsm()
    m.start(Transaction.read(0x0))
    with pytest.raises(RuntimeError):
        m.start(Transaction.read(0x4))


def test_start_clears_stale_response():
    tr = Transaction.read(0x0)
    tr.response = Resp.DECERR
    MasterFsm().start(tr)
    assert not tr.done


def test_reset_mid_flight_restarts_from_pre_delay():
    m = MasterFsm()
    tr = Transaction.write(0x10, 0x1, pre_delay=1)
    m.start(tr)
    assert steps_until(m, "awvalid") == 2
    assert m.step(in_reset()) == MASTER_IDLE
    assert m.state is MasterState.DELAY
    assert m.current is tr
    assert steps_until(m, "awvalid") == 2


def test_idle_master_holds_response_readies():
    m = MasterFsm()
    out = m.step(snap())
    assert out == MASTER_IDLE
    assert out["bready"] == out["rready"] == 1


def test_finished_requests_are_not_retained(caplog):
    caplog.set_level(logging.WARNING, logger="axil.proto.master")
    m = MasterFsm()
    for i in range(50):
        tr = Transaction.read(4 * i)
        m.start(tr)
        m.step(snap())
        m.step(snap(arvalid=1, arready=1))
        m.step(snap(rvalid=1, rdata=i))
        assert tr.done
    ref = weakref.ref(tr)
    del tr
    gc.collect()
    assert ref() is None
    assert m.current is None
