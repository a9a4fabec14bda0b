# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/axil_bus/dv/__init__.py

"""Bench for the axil_bus wiring top-level.

The agent's driver runs the master state machine, ``slv`` runs the slave
state machine and the monitor rebuilds transactions from the wires. Protocol
logic lives in ``axil.proto``; these modules only move levels between the
simulator and those machines.

Components:
- axil_bus_if: DUT ports <-> BusSnapshot
- axil_bus_item: sequence item
- axil_bus_sequence: fixed and random write/read sequences
- axil_bus_driver: master driver
- axil_bus_responder: slave responder
- axil_bus_monitor: passive monitor
- axil_bus_ref_model: shadow-memory reference model
- axil_bus_sb: response tally plus read-data comparison
- axil_bus_coverage: functional coverage
- axil_bus_env: environment
- test_axil_bus: pyuvm tests

To run tests:
    dv --design=axil_bus --test=fixed
    dv --design=axil_bus --test=random --reps=20 --nseeds=5
    dv --design=axil_bus --test=error
"""
