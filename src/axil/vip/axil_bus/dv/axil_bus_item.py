# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/axil_bus/dv/axil_bus_item.py

"""Sequence item for the axil_bus bench."""

from __future__ import annotations

from axil.proto import Transaction
from axil.vip.shared.dv import BaseItem


class AxilItem(BaseItem):
    """One AXI4-Lite access as it travels through pyuvm.

    Inputs: is_write, address, data (write payload), pre_delay
    Outputs: data (read result), response

    The driver and the monitor each produce their own item for the same
    wire event; they are never the same object.
    """

    def __init__(self, name: str = "axil_item") -> None:
        super().__init__(name)
        self.is_write: bool = False
        self.address: int = 0
        self.data: int = 0
        self.pre_delay: int = 0
        self.response: int | None = None

    def _in_fields(self) -> tuple[str, ...]:
        return ("is_write", "address", "data", "pre_delay")

    def _out_fields(self) -> tuple[str, ...]:
        return ("data", "response")

    @property
    def kind(self) -> str:
        return "write" if self.is_write else "read"

    @classmethod
    def observed(
        cls, name: str, *, address: int, data: int, is_write: bool, response: int
    ) -> AxilItem:
        """Item built from monitored wire values (no pre-delay on the wire)."""
        item = cls(name)
        item.address = address
        item.data = data
        item.is_write = is_write
        item.response = response
        return item

    def set_request(self, tr: Transaction) -> None:
        self.is_write = tr.is_write
        self.address = tr.address
        self.data = tr.data
        self.pre_delay = tr.pre_delay
        self.response = None

    def to_transaction(self) -> Transaction:
        return Transaction(
            address=self.address,
            data=self.data if self.is_write else 0,
            is_write=self.is_write,
            pre_delay=self.pre_delay,
        )
