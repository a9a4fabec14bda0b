# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/shared/dv/base_item.py

"""Sequence item with declared input and output fields."""

from __future__ import annotations

import copy
import json
from typing import Iterable, Self

import pyuvm


class BaseItem(pyuvm.uvm_sequence_item):
    """Item whose fields are split into inputs and outputs.

    Inputs are what a sequence sets (request fields). Outputs are what the
    bus returns (response fields). Comparison, copying and printing go through
    these two lists, so subclasses only declare them:

        >>> class RegItem(BaseItem):
        ...     def __init__(self, name="reg_item"):
        ...         super().__init__(name)
        ...         self.addr = 0
        ...         self.rdata = None
        ...     def _in_fields(self):
        ...         return ("addr",)
        ...     def _out_fields(self):
        ...         return ("rdata",)
    """

    def _in_fields(self) -> Iterable[str]:
        return ()

    def _out_fields(self) -> Iterable[str]:
        return ()

    def _all_fields(self) -> tuple[str, ...]:
        # declared order, duplicates dropped
        return tuple(dict.fromkeys([*self._in_fields(), *self._out_fields()]))

    def clone(self) -> Self:
        return copy.deepcopy(self)

    def copy_from(self, other: Self) -> None:
        """Copy every declared field from an item of the same type."""
        if type(self) is not type(other):
            raise TypeError(
                f"copy_from: {type(other).__name__} -> {type(self).__name__}"
            )
        for f in self._all_fields():
            setattr(self, f, getattr(other, f))

    def to_dict(self) -> dict[str, object]:
        return {f: getattr(self, f) for f in self._all_fields()}

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True, default=str)

    def inputs_str(self) -> str:
        return json.dumps(
            {f: getattr(self, f) for f in self._in_fields()}, sort_keys=True
        )

    def outputs_str(self) -> str:
        return json.dumps(
            {f: getattr(self, f) for f in self._out_fields()}, sort_keys=True
        )

    def compare_in(self, other: Self, *, fields: Iterable[str] | None = None) -> bool:
        if type(self) is not type(other):
            return False
        flist = list(fields) if fields is not None else list(self._in_fields())
        return all(getattr(self, f) == getattr(other, f) for f in flist)

    def compare_out(self, other: Self, *, fields: Iterable[str] | None = None) -> bool:
        if type(self) is not type(other):
            return False
        return not self.diff_out(other, fields=fields)

    def diff_out(
        self, other: Self, *, fields: Iterable[str] | None = None
    ) -> dict[str, tuple[object, object]]:
        """Output fields that differ, as {field: (self value, other value)}."""
        flist = list(fields) if fields is not None else list(self._out_fields())
        return {
            f: (getattr(self, f), getattr(other, f))
            for f in flist
            if getattr(self, f) != getattr(other, f)
        }
