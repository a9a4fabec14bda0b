# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/axil_bus/__init__.py

"""AXI4-Lite master/slave bench.

Subpackages:
- rtl: wiring-only top-level (SystemVerilog)
- dv: cocotb/pyuvm bench around the ``axil.proto`` state machines
"""
