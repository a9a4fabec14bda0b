# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/proto/cli.py

"""``axil-sim``: run a scenario on the cycle kernel and print the verdict.

Typical usage:
    axil-sim --test fixed
    axil-sim --test random --reps 20 --seed 0x1234 --delays
    axil-sim --spec run.yaml --outdir out_sim

Exit code is 0 for PASS, 1 for FAIL and 2 for TIMEOUT.
"""

from __future__ import annotations

import argparse
import json
import random
from pathlib import Path
from typing import Literal, Sequence, cast

import yaml
from pydantic import BaseModel, NonNegativeInt, PositiveInt, model_validator

from axil.utils import configure_logger, ensure_dir, green, normalize_seed, red, yellow

from .scenarios import (
    DEFAULT_REPS,
    DEFAULT_WINDOW,
    FIXED_ADDR,
    FIXED_DATA,
    RANDOM_DATA,
    fixed_write_read,
    random_write_read,
)
from .sim import CycleSim, Outcome, RunResult
from .store import DEFAULT_SENTINEL, SparseStore
from .transaction import MASK32, Transaction

EXIT_CODES: dict[Outcome, int] = {
    Outcome.PASS: 0,
    Outcome.FAIL: 1,
    Outcome.TIMEOUT: 2,
}


class RunSpec(BaseModel):
    """Validated run description (from YAML, then CLI overrides)."""

    test: Literal["fixed", "random"] = "fixed"
    reps: NonNegativeInt = DEFAULT_REPS
    addr_low: NonNegativeInt = DEFAULT_WINDOW[0]
    addr_high: NonNegativeInt = DEFAULT_WINDOW[1]
    address: NonNegativeInt = FIXED_ADDR
    data: NonNegativeInt | None = None
    randomize_delay: bool = False
    seed: str = "random"
    reset_cycles: NonNegativeInt = 2
    max_cycles: PositiveInt = 100_000
    sentinel: NonNegativeInt = DEFAULT_SENTINEL

    @model_validator(mode="after")
    def _check_words(self) -> "RunSpec":
        for name in ("addr_low", "addr_high", "address", "sentinel"):
            if getattr(self, name) > MASK32:
                raise ValueError(f"{name} must fit in 32 bits")
        if self.data is not None and self.data > MASK32:
            raise ValueError("data must fit in 32 bits")
        return self

    def __str__(self) -> str:
        return f"{self.__class__.__name__}:\n" + json.dumps(self.model_dump(), indent=2)


def get_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments for ``axil-sim``."""
    ap = argparse.ArgumentParser(
        description="Run an AXI4-Lite scenario on the cycle kernel",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    ap.add_argument("--spec", help="YAML run spec (CLI flags override it)")
    ap.add_argument("--test", choices=["fixed", "random"], help="scenario")
    ap.add_argument("--reps", type=int, help="write/read pairs for --test random")
    ap.add_argument("--seed", help="decimal, 0x..., or 'random'")
    ap.add_argument(
        "--delays", action="store_true", help="randomize pre-delays in [0, 5]"
    )
    ap.add_argument("--max-cycles", type=int, help="cycle budget before TIMEOUT")
    ap.add_argument("--outdir", default="out_sim", help="output directory")
    ap.add_argument(
        "--verbosity",
        choices=["critical", "error", "warning", "info", "debug"],
        default="info",
        help="logging level",
    )
    return ap.parse_args(argv)


def load_spec(args: argparse.Namespace) -> RunSpec:
    """Merge the YAML spec (if any) with CLI overrides and validate."""
    raw: dict = {}
    if args.spec:
        spec_path = Path(args.spec)
        if not spec_path.exists():
            raise SystemExit(f"ERROR: Spec file not found: {args.spec}")
        with open(spec_path, encoding="utf-8") as f:
            raw = cast(dict, yaml.safe_load(f) or {})
    overrides = {
        "test": args.test,
        "reps": args.reps,
        "seed": args.seed,
        "max_cycles": args.max_cycles,
    }
    raw.update({k: v for k, v in overrides.items() if v is not None})
    if args.delays:
        raw["randomize_delay"] = True
    if "seed" in raw:
        raw["seed"] = str(raw["seed"])
    return RunSpec.model_validate(raw)


def build_requests(spec: RunSpec, rng: random.Random) -> list[Transaction]:
    """Turn a run spec into the request stream."""
    if spec.test == "fixed":
        data = FIXED_DATA if spec.data is None else spec.data
        return fixed_write_read(spec.address, data)
    return random_write_read(
        spec.reps,
        rng,
        low=spec.addr_low,
        high=spec.addr_high,
        data=RANDOM_DATA if spec.data is None else spec.data,
        randomize_delay=spec.randomize_delay,
    )


def run_spec(spec: RunSpec, seed: int) -> RunResult:
    """Build and run one scenario."""
    rng = random.Random(seed)
    sim = CycleSim(
        store=SparseStore(spec.sentinel),
        reset_cycles=spec.reset_cycles,
        max_cycles=spec.max_cycles,
    )
    return sim.run(build_requests(spec, rng))


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for ``axil-sim``."""
    args = get_args(argv)
    outdir = ensure_dir(args.outdir, True)
    logger = configure_logger(args.verbosity, outdir / "run.log")

    spec = load_spec(args)
    logger.info(spec)
    seed = normalize_seed(random.Random(), spec.seed)
    logger.info("seed: %d", seed)

    result = run_spec(spec, seed)

    summary = {"test": spec.test, "seed": seed, **result.to_dict()}
    (outdir / "summary.json").write_text(json.dumps(summary, indent=2) + "\n")

    line = (
        f"*** {result.outcome.value} - writes={result.summary.writes} "
        f"reads={result.summary.reads} errors={result.summary.errors} ***"
    )
    if result.outcome is Outcome.PASS:
        logger.info(green(line))
    elif result.outcome is Outcome.TIMEOUT:
        logger.error(yellow(line))
    else:
        logger.error(red(line))
    return EXIT_CODES[result.outcome]


if __name__ == "__main__":
    raise SystemExit(main())
