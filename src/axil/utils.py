# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/utils.py

"""Helpers shared by the ``dv`` and ``axil-sim`` command line tools."""

from __future__ import annotations

import logging
import random
import re
import time
from os import PathLike
from pathlib import Path
from typing import Union

RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
RESET = "\033[0m"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Logged by the bench when the test watchdog fires; the dv runner greps for it.
TIMEOUT_MARKER = "*** TEST TIMEOUT ***"


class NoColorFormatter(logging.Formatter):
    """Drops ANSI color sequences so log files stay plain text."""

    ANSI_ESCAPE = re.compile(r"\033\[[0-9;]*m")

    def format(self, record: logging.LogRecord) -> str:
        return self.ANSI_ESCAPE.sub("", super().format(record))


def absolutize_srclist(infile: Path, repo_root: Path, out_dir: Path) -> Path:
    """Write ``srclist.abs.f`` into ``out_dir`` with every path made absolute.

    Nested ``-f`` files are inlined. Other ``-``/``+`` options pass through.
    """
    out = out_dir / "srclist.abs.f"

    def expand(filepath: Path, lines_out: list[str]) -> None:
        for raw in filepath.read_text().splitlines():
            line = raw.strip()
            if not line or line.startswith("//"):
                continue
            if line.startswith("+incdir+"):
                inc = (repo_root / line[len("+incdir+") :]).resolve()
                lines_out.append(f"+incdir+{inc}")
            elif line.startswith("-f "):
                nested = (repo_root / line[3:].strip()).resolve()
                if nested.exists():
                    expand(nested, lines_out)
                else:
                    # left as-is so the simulator reports it
                    lines_out.append(line)
            elif line.startswith(("-", "+")):
                lines_out.append(line)
            else:
                lines_out.append(str((repo_root / line).resolve()))

    lines: list[str] = []
    expand(infile, lines)
    out.write_text("\n".join(lines) + "\n")
    return out


def configure_logger(
    verbosity: str = "info", log_file: Path | None = None
) -> logging.Logger:
    """Route the root logger to the console and, optionally, a file.

    The console keeps color codes; the file copy has them stripped.
    """
    root = logging.getLogger()
    root.setLevel(verbosity.upper())
    root.handlers.clear()

    console = logging.StreamHandler()
    console.setLevel(verbosity.upper())
    console.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))
    root.addHandler(console)

    if log_file:
        fh = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        fh.setLevel(verbosity.upper())
        fh.setFormatter(NoColorFormatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))
        root.addHandler(fh)

    return logging.getLogger(__name__)


def ensure_dir(
    d: Union[str, Path, PathLike[str]], make_if_not_exists: bool = False
) -> Path:
    """Return the absolute directory path, creating it if asked to."""
    path = Path(d)
    if not path.exists():
        if not make_if_not_exists:
            raise FileNotFoundError(f"Directory does not exist: {path}")
        path.mkdir(parents=True, exist_ok=True)
        logging.info("Created directory: %s", path)
    if not path.is_dir():
        raise NotADirectoryError(f"Not a directory: {path}")
    return path.resolve()


def get_repo_root() -> Path:
    """Directory holding pyproject.toml, else the parent of ``src``."""
    here = Path(__file__).resolve()
    for p in [here] + list(here.parents):
        if (p / "pyproject.toml").exists():
            return p
    for p in here.parents:
        if p.name == "src":
            return p.parent
    return here.parents[-1]


def green(s: str) -> str:
    return f"{GREEN}{s}{RESET}"


def red(s: str) -> str:
    return f"{RED}{s}{RESET}"


def yellow(s: str) -> str:
    return f"{YELLOW}{s}{RESET}"


def iso_utc() -> str:
    """Current UTC time as ISO8601 with a ``Z`` suffix."""
    return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime())


def normalize_seed(rng: random.Random, s: str) -> int:
    """Turn a seed string into a 32-bit int.

    'rand', 'random' and 'auto' draw a fresh seed from ``rng``; anything else
    is parsed with base prefixes (``0x...``). Bad input exits the tool.
    """
    if s.lower() in {"rand", "random", "auto"}:
        return rng.getrandbits(32)
    try:
        return int(s, 0) & 0xFFFF_FFFF
    except ValueError as exc:
        raise SystemExit(
            f"[axil] Invalid seed '{s}'. Use decimal, 0x..., or 'random'."
        ) from exc
