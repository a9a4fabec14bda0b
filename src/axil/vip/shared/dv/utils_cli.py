# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/shared/dv/utils_cli.py

"""Bench settings from the environment and plusargs.

Each setting resolves as: environment (``NAME``, then ``AXIL_NAME``), then
plusarg (``+NAME`` or ``+NAME=value``), then the default.

Plusargs are read from the first non-empty of ``PLUSARGS``,
``COCOTB_PLUSARGS`` and ``AXIL_PLUSARGS``. A bare ``+NAME`` means true.
Integers accept base prefixes (``+AXIL_ADDR_HIGH=0xff``).

Factory overrides follow the uvm_cmdline_processor spelling::

    +uvm_set_type_override=req,over[,replace]
    +uvm_set_inst_override=req,over,path

Example:
    >>> reps = get_int_setting("AXIL_SEQ_REPS", 5)
    >>> cov = get_bool_setting("COVERAGE_EN", True)
"""

from __future__ import annotations

import logging
import os
from typing import Callable, Iterator, TypeVar

import pyuvm

ENV_PREFIX = "AXIL_"
PLUSARG_VARS = ("PLUSARGS", "COCOTB_PLUSARGS", "AXIL_PLUSARGS")

_BOOL_WORDS = {
    **dict.fromkeys(("1", "true", "yes", "y", "on"), True),
    **dict.fromkeys(("0", "false", "no", "n", "off"), False),
}

V = TypeVar("V")


def iter_plusargs() -> list[str]:
    """Tokens of the first non-empty plusarg variable."""
    for var in PLUSARG_VARS:
        s = os.environ.get(var, "")
        if s:
            return s.split()
    return []


def _plusarg(name: str) -> str | None:
    """'val' for +NAME=val, '1' for a bare +NAME, else None."""
    for tok in iter_plusargs():
        if tok == f"+{name}":
            return "1"
        key, sep, val = tok.partition("=")
        if sep and key == f"+{name}":
            return val
    return None


def _candidates(name: str) -> Iterator[str]:
    """Raw values for ``name`` in priority order."""
    keys = (name,) if name.startswith(ENV_PREFIX) else (name, ENV_PREFIX + name)
    for key in keys:
        v = os.environ.get(key)
        if v is not None:
            yield v
    v = _plusarg(name)
    if v is not None:
        yield v


def _resolve(name: str, default: V, parse: Callable[[str], V | None]) -> V:
    """First candidate that ``parse`` accepts, else ``default``."""
    for raw in _candidates(name):
        value = parse(raw)
        if value is not None:
            return value
    return default


def _parse_int(raw: str) -> int | None:
    try:
        return int(raw, 0)
    except ValueError:
        return None


def get_bool_setting(name: str, default: bool) -> bool:
    return _resolve(name, default, lambda raw: _BOOL_WORDS.get(raw.strip().lower()))


def get_str_setting(name: str, default: str) -> str:
    return _resolve(name, default, lambda raw: raw)


def get_int_setting(name: str, default: int) -> int:
    """Integer setting. Unparseable values fall through to the next source."""
    return _resolve(name, default, _parse_int)


def _override_args(tok: str, flag: str) -> list[str] | None:
    prefix = f"+{flag}="
    if not tok.startswith(prefix):
        return None
    return [p.strip() for p in tok[len(prefix) :].split(",")]


def apply_factory_overrides_from_plusargs(logger: logging.Logger | None = None) -> None:
    """Apply +uvm_set_type_override / +uvm_set_inst_override plusargs.

    Malformed or rejected overrides are logged and skipped.
    """
    log = logger or logging.getLogger("axil.utils_cli.factory")
    factory = pyuvm.uvm_factory()

    for tok in iter_plusargs():
        args = _override_args(tok, "uvm_set_type_override")
        if args is not None:
            if len(args) not in (2, 3):
                log.warning("malformed %s", tok)
                continue
            replace = len(args) == 2 or args[2] != "0"
            try:
                factory.set_type_override_by_name(args[0], args[1], replace=replace)
            except (KeyError, ValueError, TypeError) as exc:
                log.warning("type override %s rejected: %s", tok, exc)
            else:
                log.debug("type override %s -> %s", args[0], args[1])
            continue

        args = _override_args(tok, "uvm_set_inst_override")
        if args is not None:
            if len(args) != 3:
                log.warning("malformed %s", tok)
                continue
            try:
                factory.set_inst_override_by_name(*args)
            except (KeyError, ValueError, TypeError) as exc:
                log.warning("instance override %s rejected: %s", tok, exc)
            else:
                log.debug("instance override %s @ %s -> %s", args[0], args[2], args[1])
