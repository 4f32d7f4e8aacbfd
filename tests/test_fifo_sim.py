# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: tests/test_fifo_sim.py

"""syncfifo-sim command line: example scenarios, output files, bad input."""

from __future__ import annotations

import csv
import json
import logging
import random
from pathlib import Path

import pytest

import syncfifo.tools
from syncfifo.tools.fifo_sim import main
from syncfifo.utils import normalize_seed

EXAMPLES = Path(syncfifo.tools.__file__).parent / "fifo_sim_examples"


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """main() reconfigures the root logger; put it back afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)


def _trace(path: Path) -> list[dict[str, int]]:
    with path.open(newline="") as f:
        return [{k: int(v) for k, v in row.items()} for row in csv.DictReader(f)]


def test_scenario_a(tmp_path: Path) -> None:
    rc = main(
        [str(EXAMPLES / "scenario_a.yaml"), "--outdir", str(tmp_path), "--no-plot"]
    )
    assert rc == 0
    rows = _trace(tmp_path / "scenario_a_trace.csv")
    assert len(rows) == 19
    assert sum(r["wr_ack"] for r in rows) == 7
    assert [r["violation"] for r in rows[7:11]] == [1, 1, 1, 1]
    reads = [r["rd_data"] for r in rows[11:] if r["rd_valid"]]
    assert reads == list(range(1, 8))
    assert (tmp_path / "run.log").exists()
    assert (tmp_path / "scenario_a_summary.txt").exists()

    scalars = json.loads((tmp_path / "scenario_a_results.json").read_text())
    assert scalars["passed"] is True
    assert scalars["occ_peak"] == 7


def test_scenario_b_non_power_of_two(tmp_path: Path) -> None:
    rc = main(
        [str(EXAMPLES / "scenario_b.yaml"), "--outdir", str(tmp_path), "--no-plot"]
    )
    assert rc == 0
    rows = _trace(tmp_path / "scenario_b_trace.csv")
    assert rows[8]["wr_ack"] == 0
    reads = [r["rd_data"] for r in rows if r["rd_valid"]]
    assert reads == [*range(0x1000, 0x1008), 0x2000, 0x2001]
    assert rows[-1]["empty"] == 1


def test_simultaneous_with_plot(tmp_path: Path) -> None:
    rc = main([str(EXAMPLES / "simultaneous.yaml"), "--outdir", str(tmp_path)])
    assert rc == 0
    rows = _trace(tmp_path / "simultaneous_trace.csv")
    assert [r["occupancy"] for r in rows] == [1, 1, 1, 1, 0, 0]
    assert [r["rd_data"] for r in rows] == [0, 0, 0xA1, 0xB2, 0xC3, 0xC3]
    assert (tmp_path / "simultaneous_plot.png").stat().st_size > 0


def test_multiple_specs_use_subdirectories(tmp_path: Path) -> None:
    specs = [str(EXAMPLES / f) for f in ("random_depth9.yaml", "wrapper_aw4.yaml")]
    rc = main([*specs, "--outdir", str(tmp_path), "--no-plot"])
    assert rc == 0
    assert (tmp_path / "random_depth9" / "random_depth9_trace.csv").exists()
    scalars = json.loads(
        (tmp_path / "wrapper_aw4" / "wrapper_aw4_results.json").read_text()
    )
    assert scalars["capacity"] == 16
    assert scalars["ticks"] == 500
    assert scalars["violations"] == 0


def test_same_stem_from_two_directories_keeps_both(tmp_path: Path) -> None:
    text = (EXAMPLES / "scenario_a.yaml").read_text()
    specs = []
    for d in ("x", "y"):
        (tmp_path / d).mkdir()
        spec = tmp_path / d / "scenario_a.yaml"
        spec.write_text(text)
        specs.append(str(spec))
    out = tmp_path / "out"
    rc = main([*specs, "--outdir", str(out), "--no-plot"])
    assert rc == 0
    assert (out / "scenario_a" / "scenario_a_trace.csv").exists()
    assert (out / "scenario_a_2" / "scenario_a_trace.csv").exists()


def test_seed_override_is_reproducible(tmp_path: Path) -> None:
    spec = str(EXAMPLES / "random_depth9.yaml")
    for sub in ("a", "b"):
        main([spec, "--outdir", str(tmp_path / sub), "--seed", "0x1234", "--no-plot"])
    a = (tmp_path / "a" / "random_depth9_trace.csv").read_text()
    b = (tmp_path / "b" / "random_depth9_trace.csv").read_text()
    assert a == b


@pytest.mark.parametrize(
    "text",
    [
        "capacity: 1\nsteps:\n  - {wr: 1}\n",
        "steps:\n  - {wr: 1}\n",
        "capacity: 4\naddress_width: 2\nsteps:\n  - {wr: 1}\n",
        "capacity: 4\n",
        "capacity: 4\nsteps: []\n",
        "capacity: 4\nsteps:\n  - {write: 1}\n",
        "capacity: 4\nrandom: {write_prob: 2.0}\n",
        "- just\n- a list\n",
    ],
)
def test_bad_spec_exits(tmp_path: Path, text: str) -> None:
    spec = tmp_path / "bad.yaml"
    spec.write_text(text)
    with pytest.raises(SystemExit):
        main([str(spec), "--outdir", str(tmp_path / "out"), "--no-plot"])


def test_missing_spec_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main([str(tmp_path / "nope.yaml"), "--outdir", str(tmp_path / "out")])


def test_bad_seed_exits(tmp_path: Path) -> None:
    spec = str(EXAMPLES / "random_depth9.yaml")
    with pytest.raises(SystemExit):
        main([spec, "--outdir", str(tmp_path), "--seed", "banana", "--no-plot"])


@pytest.mark.parametrize(
    "text, expected", [("12", 12), ("0x1f", 31), (" 7 ", 7), ("-1", 0xFFFF_FFFF)]
)
def test_normalize_seed(text: str, expected: int) -> None:
    assert normalize_seed(random.Random(), text) == expected


def test_normalize_seed_random_words_draw_from_rng() -> None:
    expected = random.Random(3).getrandbits(32)
    assert normalize_seed(random.Random(3), "Random") == expected
