# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/__init__.py

"""AXIL: an AXI4-Lite protocol engine and verification IP.

Main Components:

proto:
    Simulator-free protocol engine. Bus channel model, slave responder,
    master driver, passive monitor, scoreboard and sequence generator, all
    stepped in lock-step against a shared per-edge signal snapshot. Ships the
    ``axil-sim`` command-line runner.

vip:
    UVM-style testbench built on cocotb and pyuvm. The bench components wrap
    the ``proto`` state machines so the protocol logic lives in one place.
    Includes the shared base-class library and the ``dv`` runner.

utils:
    Common utilities used across the package
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as pkg_version

try:
    __version__ = pkg_version("axil-vip")
except PackageNotFoundError:
    __version__ = "0+local"
