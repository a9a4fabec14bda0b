# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/shared/dv/base_sequencer.py

"""Sequencer with the bench logger level applied."""

from __future__ import annotations

import pyuvm

from . import utils_dv


class BaseSequencer(pyuvm.uvm_sequencer):
    """Connection point between sequences and the driver's seq_item_port."""

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        utils_dv.configure_component_logger(self)
