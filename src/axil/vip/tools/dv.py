# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/tools/dv.py

"""Run the AXIL benches via cocotb, pyuvm, and pytest.

One invocation builds the design once and runs the selected pyuvm test on
every requested seed. Each seed runs inside its own ``pytest.main`` call so
it gets a junit file, and is classified PASS, FAIL or TIMEOUT. The class and
a replay command go into ``manifest.json`` in the seed's test directory.

Command-line interface:
    dv --design=<design> --test=<fixed|random|error|all> [OPTIONS]

Typical usage:
    # Scenario A: one write, one read
    dv --test=fixed

    # Scenario B with 20 pairs on 5 random seeds
    dv --test=random --reps=20 --nseeds=5

    # Slave answers SLVERR for some reads: counted, the run completes
    dv --test=error --reps=20

    # No slave on the bus: the watchdog must fire
    RESPONDER_EN=0 dv --test=fixed --timeout-ns=5000 --expect=TIMEOUT
"""

from __future__ import annotations

import argparse
import hashlib
import json
import logging
import os
import random
import shlex
import sys
import time
import xml.etree.ElementTree as ET
from dataclasses import asdict, dataclass, field, replace
from pathlib import Path
from typing import Any, Final, Sequence

import pytest
from cocotb_tools.runner import get_runner

if (__package__ in (None, "")) and (__spec__ is None):
    print("[dv] ERROR: Please run as 'dv'", file=sys.stderr)
    raise SystemExit(2)

from axil import utils  # isort:skip pylint: disable=wrong-import-position

PROJ_DIR: Final[Path] = utils.get_repo_root()
VIP_ROOT: Final[Path] = PROJ_DIR / "src" / "axil" / "vip"
ENTRY: Final[str] = f"{Path(__file__).resolve()}::test_framework"
PYTEST_OPTS: Final[tuple[str, ...]] = ("-vv", "-s", "-ra", "-x")

# --test choice -> pyuvm test class ("all" runs every test in the module)
TEST_CLASSES: Final[dict[str, str | None]] = {
    "fixed": "AxilWriteReadTest",
    "random": "AxilRandomTest",
    "error": "AxilReadErrorTest",
    "all": None,
}
STATUSES: Final[tuple[str, ...]] = ("PASS", "FAIL", "TIMEOUT")
DEFAULT_SEED = 42
DEFAULT_TIMEOUT_NS = 1_000_000

log = logging.getLogger("axil.dv")


# === CLI ===


def _env(name: str, fallback: str) -> str:
    return os.getenv(name, fallback)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        prog="dv",
        description="Build an AXIL bench and run its pyuvm tests over seeds",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    ap.add_argument("--cmd", choices=["build", "test", "both"], default=_env("CMD", "both"))
    ap.add_argument("--outdir", default="out_dv", help="output directory")
    ap.add_argument(
        "--verbosity",
        choices=["critical", "error", "warning", "info", "debug"],
        default=_env("VERBOSITY", "info"),
    )

    build = ap.add_argument_group("build")
    build.add_argument("--design", default="axil_bus", help="directory under vip/")
    build.add_argument("--sim", choices=["icarus", "verilator"], default=_env("SIM", "icarus"))
    build.add_argument(
        "--waves", action="store_true", default=_env("WAVES", "0") == "1", help="dump FST"
    )
    build.add_argument("--build-force", action="store_true", help="rebuild even if current")
    build.add_argument(
        "--build-arg",
        dest="build_args",
        action="append",
        default=[],
        metavar="ARG",
        help="passed verbatim to the simulator, repeatable",
    )

    test = ap.add_argument_group("test")
    test.add_argument("--test", choices=sorted(TEST_CLASSES), default="fixed")
    test.add_argument("--expect", choices=STATUSES, default="PASS")
    test.add_argument("--reps", type=int, help="write/read pairs for --test=random")
    test.add_argument(
        "--timeout-ns",
        type=int,
        default=int(_env("TEST_TIMEOUT_NS", str(DEFAULT_TIMEOUT_NS))),
        help="sequence watchdog in simulated ns, 0 disables",
    )
    test.add_argument(
        "--no-check", action="store_true", default=_env("CHECK_EN", "1") == "0"
    )
    test.add_argument(
        "--no-coverage", action="store_true", default=_env("COVERAGE_EN", "1") == "0"
    )

    seeds = ap.add_argument_group("seeds")
    seeds.add_argument("--seeds", nargs="+", metavar="SEED", help="decimal, 0x..., or 'random'")
    seeds.add_argument("--nseeds", type=int, default=0, help="draw N seeds instead")
    seeds.add_argument("--seed-base", type=int, default=1999, help="seeds the seed draw")

    args = ap.parse_args(argv)
    if args.reps is not None and args.reps < 0:
        ap.error("--reps must be >= 0")
    if args.timeout_ns < 0:
        ap.error("--timeout-ns must be >= 0")
    if not (VIP_ROOT / args.design / "rtl" / "srclist.f").is_file():
        ap.error(f"no rtl/srclist.f for design {args.design!r}")
    return args


def seeds_from_args(args: argparse.Namespace) -> list[int]:
    rng = random.Random(args.seed_base & 0xFFFF_FFFF)
    if args.seeds:
        return [utils.normalize_seed(rng, s) for s in args.seeds]
    if args.nseeds > 0:
        return [utils.normalize_seed(rng, "random") for _ in range(args.nseeds)]
    return [DEFAULT_SEED]


def replay_argv(argv: Sequence[str], seed: int) -> list[str]:
    """``argv`` with its seed selection replaced by ``--seeds <seed>``."""
    out: list[str] = []
    i = 0
    while i < len(argv):
        tok = argv[i]
        i += 1
        if tok in ("--nseeds", "--seed-base"):
            i += 1
        elif tok == "--seeds":
            while i < len(argv) and not argv[i].startswith("-"):
                i += 1
        elif not tok.startswith(("--nseeds=", "--seeds=", "--seed-base=")):
            out.append(tok)
    return [*out, "--seeds", str(seed)]


# === Run plan ===


@dataclass(frozen=True)
class SeedRun:  # pylint: disable=too-many-instance-attributes
    """Everything one seed needs: where to build, where to run, what to set."""

    design: str
    sim: str
    waves: bool
    test: str
    seed: int
    outdir: Path
    do_build: bool = True
    do_test: bool = True
    build_force: bool = False
    user_build_args: tuple[str, ...] = ()
    bench_env: dict[str, str] = field(default_factory=dict)
    argv: tuple[str, ...] = ()

    @property
    def build_dir(self) -> Path:
        """<outdir>/builds/<design>.<hash10>, keyed on what changes the build."""
        key = json.dumps(
            [self.sim, self.waves, list(self.user_build_args)], separators=(",", ":")
        )
        digest = hashlib.sha1(key.encode()).hexdigest()[:10]
        return self.outdir / "builds" / f"{self.design}.{digest}"

    @property
    def test_dir(self) -> Path:
        tag = f"{self.test}.{self.seed}" if self.do_test else "build_only"
        return self.outdir / "tests" / f"{self.build_dir.name}.{tag}"

    @property
    def test_module(self) -> str:
        return f"axil.vip.{self.design}.dv.test_{self.design}"

    def build_args(self) -> list[str]:
        args: list[str] = []
        if self.sim == "verilator":
            args += ["--timing", "--autoflush"]
            if self.waves:
                args.append("--trace-fst")
        srclist = VIP_ROOT / self.design / "rtl" / "srclist.f"
        self.build_dir.mkdir(parents=True, exist_ok=True)
        args += ["-f", str(utils.absolutize_srclist(srclist, PROJ_DIR, self.build_dir))]
        return args + list(self.user_build_args)

    def wave_args(self) -> tuple[list[str], list[str]]:
        """(test_args, plusargs) that place the wave file in the test dir."""
        if not self.waves:
            return [], []
        wave_file = self.test_dir / "waves.fst"
        if self.sim == "verilator":
            return ["--trace-file", str(wave_file)], []
        return [], [f"+dumpfile_path={wave_file}"]


def plan_runs(args: argparse.Namespace, argv: Sequence[str]) -> list[SeedRun]:
    """One SeedRun per seed; only the first one builds."""
    env = {
        "COCOTB_LOG_LEVEL": args.verbosity.upper(),
        "TEST_TIMEOUT_NS": str(args.timeout_ns),
        "CHECK_EN": "0" if args.no_check else "1",
        "COVERAGE_EN": "0" if args.no_coverage else "1",
    }
    if args.reps is not None:
        env["AXIL_SEQ_REPS"] = str(args.reps)
    base = SeedRun(
        design=args.design,
        sim=args.sim,
        waves=bool(args.waves),
        test=args.test,
        seed=DEFAULT_SEED,
        outdir=Path(args.outdir).resolve(),
        do_build=args.cmd in ("build", "both"),
        do_test=args.cmd in ("test", "both"),
        build_force=bool(args.build_force),
        user_build_args=tuple(args.build_args),
        bench_env=env,
        argv=tuple(argv),
    )
    if not base.do_test:
        return [base]
    runs = [replace(base, seed=s) for s in seeds_from_args(args)]
    return [runs[0]] + [replace(r, do_build=False) for r in runs[1:]]


# === Simulator steps ===


def run_build(run: SeedRun) -> None:
    log.info("building %s with %s in %s", run.design, run.sim, run.build_dir)
    build_args = run.build_args()
    get_runner(run.sim).build(
        hdl_toplevel=run.design,
        timescale=("1ns", "1ps"),
        waves=run.waves,
        build_dir=run.build_dir,
        build_args=build_args,
        log_file=str(run.build_dir / "build.log"),
        always=run.build_force,
    )
    stamp = {
        "built_at": utils.iso_utc(),
        "design": run.design,
        "sim": run.sim,
        "waves": run.waves,
        "build_args": build_args,
    }
    (run.build_dir / "manifest.json").write_text(json.dumps(stamp, indent=2))


def run_test(run: SeedRun) -> None:
    test_args, plusargs = run.wave_args()
    extra_env = dict(run.bench_env)
    if extra_env.get("COVERAGE_EN") == "1":
        extra_env["COV_YAML"] = str(run.test_dir / "coverage.yml")
    log.info("running %s seed=%d in %s", run.test, run.seed, run.test_dir)
    get_runner(run.sim).test(
        hdl_toplevel_lang="verilog",
        hdl_toplevel=run.design,
        waves=run.waves,
        build_dir=str(run.build_dir),
        test_dir=str(run.test_dir),
        test_module=run.test_module,
        test_filter=TEST_CLASSES[run.test],
        seed=run.seed,
        log_file=str(run.test_dir / "test.log"),
        test_args=test_args,
        plusargs=plusargs,
        extra_env=extra_env,
        results_xml=str(run.test_dir / "results.xml"),
    )


# === Pytest entry point ===


@dataclass
class _Current:
    run: SeedRun | None = None


_CURRENT = _Current()


def test_framework() -> None:
    """Build and/or test the SeedRun that ``main`` staged."""
    run = _CURRENT.run
    if run is None:
        raise RuntimeError("[dv] no run staged; use the 'dv' command")
    if run.do_build:
        run_build(run)
    elif not run.build_dir.is_dir():
        raise RuntimeError(f"[dv] build dir missing: {run.build_dir}; run --cmd build first")
    if run.do_test:
        run_test(run)


# === Classification ===


def read_results(results_xml: Path) -> tuple[int, int]:
    """(tests, failed) from a cocotb junit file; (0, 0) when absent."""
    if not results_xml.is_file():
        return (0, 0)
    cases = list(ET.parse(results_xml).getroot().iter("testcase"))
    failed = [
        tc for tc in cases if tc.find("failure") is not None or tc.find("error") is not None
    ]
    return (len(cases), len(failed))


def classify(framework_rc: int, results_xml: Path, test_log: Path) -> str:
    """PASS, FAIL or TIMEOUT for one seed.

    A watchdog expiry is recognized by its log marker and outranks any other
    failure. Otherwise the junit file decides, falling back to pytest's rc
    for build-only runs.
    """
    if test_log.is_file():
        text = test_log.read_text(encoding="utf-8", errors="replace")
        if utils.TIMEOUT_MARKER in text:
            return "TIMEOUT"
    tests, failed = read_results(results_xml)
    ok = framework_rc == 0 and (tests == 0 or failed == 0)
    return "PASS" if ok else "FAIL"


def execute(run: SeedRun, expect: str) -> bool:
    """Run one seed under pytest, write its manifest, return status == expect."""
    run.test_dir.mkdir(parents=True, exist_ok=True)
    _CURRENT.run = run
    sys.modules.setdefault("axil.vip.tools.dv", sys.modules[__name__])

    t0 = time.time()
    try:
        rc = int(pytest.main([*PYTEST_OPTS, ENTRY]))
    finally:
        _CURRENT.run = None
    elapsed = time.time() - t0

    results = run.test_dir / "results.xml"
    status = classify(rc, results, run.test_dir / "test.log")
    tests, failed = read_results(results)
    replay = shlex.join(["dv", *replay_argv(run.argv, run.seed)])
    manifest: dict[str, Any] = {
        "status": status,
        "expect": expect,
        "tests": tests,
        "failed": failed,
        "duration_s": round(elapsed, 3),
        "replay_cmd": replay,
        "build_dir": str(run.build_dir),
        "run": asdict(run),
    }
    (run.test_dir / "manifest.json").write_text(
        json.dumps(manifest, indent=2, default=str), encoding="utf-8"
    )

    met = status == expect
    label = f"{status} ({'expected' if met else 'UNEXPECTED'}) {elapsed:.1f}s"
    if met:
        colored = utils.green(label)
    elif status == "TIMEOUT":
        colored = utils.yellow(label)
    else:
        colored = utils.red(label)
    print(f"[dv] {colored}: {replay}")
    return met


# === Main ===


def main(argv: Sequence[str] | None = None) -> int:
    """0 iff every seed met ``--expect``."""
    raw = list(sys.argv[1:] if argv is None else argv)
    args = parse_args(raw)
    logging.basicConfig(
        level=args.verbosity.upper(), format=utils.LOG_FORMAT, datefmt=utils.LOG_DATEFMT
    )
    runs = plan_runs(args, raw)
    log.info("seeds: %s", [r.seed for r in runs])
    results = [execute(run, args.expect) for run in runs]
    return 0 if all(results) else 1


if __name__ == "__main__":
    raise SystemExit(main())
