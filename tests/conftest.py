# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: tests/conftest.py

"""Shared helpers for the protocol engine tests."""

from __future__ import annotations

import logging

import pytest

from axil.proto import MASTER_IDLE, BusSnapshot


def snap(**levels: int) -> BusSnapshot:
    """Snapshot out of reset with the master idle, overridden by ``levels``."""
    base: dict[str, int] = dict(MASTER_IDLE) | {"rst_n": 1}
    base.update(levels)
    return BusSnapshot.from_levels(base)


def in_reset() -> BusSnapshot:
    return BusSnapshot.from_levels({"rst_n": 0})


@pytest.fixture
def restore_root_logging():
    """Undo handlers that ``configure_logger`` installs on the root logger."""
    root = logging.getLogger()
    level = root.level
    before = list(root.handlers)
    yield
    for h in list(root.handlers):
        if h not in before and not type(h).__module__.startswith("_pytest"):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
