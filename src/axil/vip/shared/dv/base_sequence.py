# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/shared/dv/base_sequence.py

"""Item-generating sequence base."""

from __future__ import annotations

import logging
from typing import Generic, Type, TypeVar, cast

import pyuvm

from . import utils_dv
from .base_item import BaseItem
from .base_sequencer import BaseSequencer

T = TypeVar("T", bound=BaseItem)


class BaseSequence(pyuvm.uvm_sequence, Generic[T]):
    """Runs ``seq_len`` items through start_item/finish_item.

    body():
        1. ``body_pre()`` (may change seq_len)
        2. resolve the concrete item type through the factory, once
        3. for each index: make_item -> start_item -> set_item_inputs
           -> finish_item
        4. ``body_post()``

    Subclasses implement ``set_item_inputs(item, index)``. A seq_len of 0 is
    allowed and sends nothing.
    """

    def __init__(self, name: str = "seq", seq_len: int = 100) -> None:
        super().__init__(name)
        self.logger: logging.Logger = logging.getLogger(f"uvm.{name}")
        utils_dv.configure_non_component_logger(self.logger)
        self.sequencer: BaseSequencer  # set by pyuvm on start()
        self._item_class_constructor: Type[T] | None = None
        self.seq_len: int = max(0, int(seq_len))

    async def body(self) -> None:
        await self.body_pre()
        self.logger.debug("%s body: length = %d", self.get_name(), self.seq_len)
        probe = pyuvm.uvm_factory().create_object_by_type(
            BaseItem, name="probe_for_type"
        )
        self._item_class_constructor = cast(Type[T], type(probe))
        make = self.make_item
        set_inputs = self.set_item_inputs
        for i in range(self.seq_len):
            item = make(i)
            await self.start_item(item)
            await set_inputs(item, i)
            await self.finish_item(item)
        await self.body_post()
        self.logger.debug("%s body end", self.get_name())

    async def body_pre(self) -> None:
        """Hook run before any item is created."""

    def make_item(self, index: int) -> T:
        if self._item_class_constructor is None:
            create = pyuvm.uvm_factory().create_object_by_type
            return cast(T, create(BaseItem, name=f"tr{index}"))
        return self._item_class_constructor(f"tr{index}")

    async def set_item_inputs(self, item: T, index: int) -> None:
        raise NotImplementedError

    async def body_post(self) -> None:
        """Hook run after the last item completes."""
