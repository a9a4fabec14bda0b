# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/shared/dv/utils_dv.py

"""pyuvm config_db wrappers, signal helpers and logger setup for the benches.

Config DB:
    uvm_config_db(): cached config DB instance
    uvm_config_db_get_try(): value or None
    uvm_config_db_get(): value or ConfigKeyError
    uvm_config_db_set(): set a value

Signals:
    get_signal(): handle lookup with a clear error
    get_signal_value_int(): int from Logic/LogicArray, None on X/Z
    sample_signals(): {name: int | None} for a group of signals
    drive_signals(): write a {name: int} mapping onto the DUT

Logging:
    desired_log_level(): level from COCOTB_LOG_LEVEL
    configure_component_logger(): for uvm_component subclasses
    configure_non_component_logger(): for sequences, models and helpers
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Any, Iterable, Mapping, Union, cast

import pyuvm
from cocotb.handle import SimHandleBase
from cocotb.types import Logic, LogicArray
from pyuvm import UVMConfigItemNotFound


class ConfigKeyError(KeyError):
    """A required config_db key (or component link) is missing."""


def desired_log_level(default: int = logging.INFO) -> int:
    name = (os.getenv("COCOTB_LOG_LEVEL") or "INFO").upper()
    return getattr(logging, name, default)


def configure_component_logger(comp: pyuvm.uvm_component) -> None:
    comp.set_logging_level(desired_log_level())


def configure_non_component_logger(logger: logging.Logger) -> None:
    """Set the level and let records reach the cocotb handlers."""
    logger.setLevel(desired_log_level())
    logger.propagate = True


@lru_cache(maxsize=1)
def uvm_config_db() -> Any:
    """pyuvm's config DB singleton, looked up without upsetting static checkers."""
    if hasattr(pyuvm, "ConfigDB") and callable(getattr(pyuvm, "ConfigDB")):
        return getattr(pyuvm, "ConfigDB")()
    return getattr(pyuvm, "uvm_config_db")()


def uvm_config_db_get_try(
    comp: pyuvm.uvm_component, key: str, inst: str = ""
) -> Any | None:
    """Value for ``key`` as seen from ``comp``, or None if unset.

    pyuvm only accepts wildcards on set(), so '*' is treated as ''.
    """
    if inst == "*":
        inst = ""
    try:
        return cast(Any, uvm_config_db().get(comp, inst, key))
    except UVMConfigItemNotFound:
        return None


def uvm_config_db_get(comp: pyuvm.uvm_component, key: str) -> object:
    val = uvm_config_db_get_try(comp, key)
    if val is not None:
        return val
    raise ConfigKeyError(
        f"config_db[{key!r}] missing for component '{comp.get_full_name()}'. "
        "Did you forget to set it in build_phase?"
    )


def uvm_config_db_set(
    ctx: pyuvm.uvm_component | None, inst_name: str, key: str, value: Any
) -> None:
    uvm_config_db().set(ctx, inst_name, key, value)


def get_signal(dut: Any, signal_name: str) -> SimHandleBase:
    """Return ``dut.<signal_name>``.

    Raises RuntimeError when the DUT has no such signal and TypeError when the
    handle carries no value.
    """
    signal = getattr(dut, signal_name, None)
    if signal is None:
        raise RuntimeError(f"Signal '{signal_name}' not found on DUT")
    if not hasattr(signal, "value"):
        raise TypeError(f"Signal '{signal_name}' has no .value property")
    return cast(SimHandleBase, signal)


def get_signal_value_int(sig: Union[Logic, LogicArray]) -> int | None:
    """Integer value if resolvable (no X/Z), else None."""
    if isinstance(sig, Logic):
        return int(sig) if sig.is_resolvable else None  # pyright: ignore
    return sig.to_unsigned() if sig.is_resolvable else None


def sample_signals(dut: Any, names: Iterable[str]) -> dict[str, int | None]:
    """Sample a group of signals. Call from a ReadOnly region."""
    return {n: get_signal_value_int(getattr(dut, n).value) for n in names}


def drive_signals(dut: Any, values: Mapping[str, int]) -> None:
    for name, val in values.items():
        getattr(dut, name).value = val
