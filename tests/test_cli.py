# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: tests/test_cli.py

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from axil.proto import cli

pytestmark = pytest.mark.usefixtures("restore_root_logging")


def summary(outdir) -> dict:
    return json.loads((outdir / "summary.json").read_text())


def test_fixed_passes(tmp_path):
    assert cli.main(["--test", "fixed", "--outdir", str(tmp_path)]) == 0
    s = summary(tmp_path)
    assert (s["outcome"], s["writes"], s["reads"], s["errors"]) == ("PASS", 1, 1, 0)
    assert (tmp_path / "run.log").exists()


def test_random_with_seed(tmp_path):
    argv = ["--test", "random", "--reps", "4", "--seed", "0x1234", "--delays"]
    assert cli.main([*argv, "--outdir", str(tmp_path)]) == 0
    s = summary(tmp_path)
    assert s["seed"] == 0x1234
    assert (s["writes"], s["reads"]) == (4, 4)


def test_cycle_budget_exit_code(tmp_path):
    assert cli.main(["--max-cycles", "5", "--outdir", str(tmp_path)]) == 2
    assert summary(tmp_path)["outcome"] == "TIMEOUT"


def test_yaml_spec_with_override(tmp_path):
    spec = tmp_path / "run.yaml"
    spec.write_text("test: random\nreps: 2\nseed: 7\nsentinel: 0x1\n")
    out = tmp_path / "out"
    assert cli.main(["--spec", str(spec), "--reps", "3", "--outdir", str(out)]) == 0
    s = summary(out)
    assert (s["test"], s["seed"], s["writes"]) == ("random", 7, 3)


def test_invalid_spec_is_rejected(tmp_path):
    spec = tmp_path / "bad.yaml"
    spec.write_text("reps: -1\n")
    with pytest.raises(ValidationError):
        cli.main(["--spec", str(spec), "--outdir", str(tmp_path)])


def test_missing_spec_file(tmp_path):
    with pytest.raises(SystemExit):
        cli.main(["--spec", str(tmp_path / "nope.yaml"), "--outdir", str(tmp_path)])


def test_out_of_range_address_is_rejected():
    with pytest.raises(ValidationError):
        cli.RunSpec(addr_high=0x1_0000_0000)
