# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: tests/test_scenarios.py

from __future__ import annotations

import logging
import random

import pytest

from axil.proto import (
    MAX_PRE_DELAY,
    RandomizationError,
    Transaction,
    constrain_field,
    fixed_write_read,
    rand_addr_in_window,
    rand_delay,
    rand_in_range,
    random_write_read,
)


def test_fixed_pair():
    wr, rd = fixed_write_read()
    assert (wr.is_write, wr.address, wr.data, wr.pre_delay) == (
        True,
        0x10,
        0xA5A5A5A5,
        0,
    )
    assert (rd.is_write, rd.address, rd.pre_delay) == (False, 0x10, 0)


def test_random_pairs_alternate_inside_window():
    reqs = random_write_read(8, random.Random(7), low=0x20, high=0x2F)
    assert len(reqs) == 16
    assert [tr.is_write for tr in reqs] == [True, False] * 8
    assert all(0x20 <= tr.address <= 0x2F for tr in reqs)
    assert all(tr.data == 0xC0DEC0DE for tr in reqs if tr.is_write)
    assert all(tr.pre_delay == 0 for tr in reqs)


def test_random_pairs_replay_with_seed():
    a = random_write_read(5, random.Random(1234))
    b = random_write_read(5, random.Random(1234))
    assert [t.to_dict() for t in a] == [t.to_dict() for t in b]


def test_random_delays_stay_in_range():
    reqs = random_write_read(50, random.Random(3), randomize_delay=True)
    delays = {tr.pre_delay for tr in reqs}
    assert delays <= set(range(MAX_PRE_DELAY + 1))
    assert len(delays) > 1


def test_zero_reps_and_negative_reps():
    assert random_write_read(0) == []
    with pytest.raises(ValueError):
        random_write_read(-1)


def test_empty_range_raises():
    rng = random.Random(0)
    with pytest.raises(RandomizationError):
        rand_in_range(rng, 5, 4)
    with pytest.raises(RandomizationError):
        rand_addr_in_window(rng, 0x0, 0x1_0000_0000)
    with pytest.raises(ValueError):
        rand_delay(rng, max_delay=-1)


def test_constrain_field_keeps_prior_value_on_failure(caplog):
    tr = Transaction.read(0x10)
    with caplog.at_level(logging.ERROR, logger="axil.proto.constraints"):
        ok = constrain_field(
            tr, "address", lambda: rand_addr_in_window(random.Random(0), 0x80, 0x40)
        )
    assert not ok
    assert tr.address == 0x10
    assert "randomization failed" in caplog.text


def test_unsatisfiable_window_still_issues_requests():
    reqs = random_write_read(2, random.Random(0), low=0x80, high=0x40)
    assert len(reqs) == 4
    assert all(tr.address == 0 for tr in reqs)


def test_transaction_masks_and_validates():
    tr = Transaction.write(0x1_0000_0010, 0x1_FFFF_FFFF)
    assert (tr.address, tr.data) == (0x10, 0xFFFFFFFF)
    with pytest.raises(ValueError):
        Transaction.read(0, pre_delay=-1)
