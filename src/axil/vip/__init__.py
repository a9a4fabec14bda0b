# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/__init__.py

"""AXI4-Lite verification IP.

Subpackages:
- shared: UVM-style base classes and utilities (cocotb + pyuvm)
- axil_bus: the AXI4-Lite bench (RTL wiring top and dv components)
- tools: the ``dv`` runner
"""
