# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/shared/dv/base_reset_item.py

"""Reset level change."""

from __future__ import annotations

from .base_item import BaseItem


class BaseResetItem(BaseItem):
    """Raw reset level plus its polarity-resolved meaning.

    ``value`` is the sampled level (0/1); ``active`` is True while the design
    is held in reset, whatever the polarity.
    """

    def __init__(self, name: str = "reset_tr") -> None:
        super().__init__(name)
        self.value: int | None = None
        self.active: bool | None = None

    def _in_fields(self) -> tuple[str, ...]:
        return ("value", "active")
