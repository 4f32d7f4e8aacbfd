# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncfifo/tools/fifo_sim.py

"""Run sync FIFO scenarios described in YAML files.

Each scenario file picks a FIFO size and a stimulus:

    name: scenario_b
    capacity: 9            # or: address_width: 3  (capacity = 2**3)
    element_width: 16
    steps:                 # scripted stimulus ...
      - {wr: 0x1000}
      - {rd: true, repeat: 8}
    # random:              # ... or random stimulus
    #   ticks: 500
    #   write_prob: 0.6
    #   read_prob: 0.4
    #   reset_prob: 0.01
    #   protocol_aware: false
    seed: 1

Every tick is checked against the queue-based reference model. Results go to
``--outdir`` (default ``out_syncfifo_<spec stem>``): run.log,
<name>_results.json, <name>_trace.csv, <name>_summary.txt and, unless
--no-plot is given, <name>_plot.png.

Usage:
    syncfifo-sim SPEC.yaml [SPEC.yaml ...] [--outdir D] [--seed S]
"""

from __future__ import annotations

import argparse
import json
import logging
import random
import shutil
import time
from pathlib import Path
from typing import Literal, Sequence, cast

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeInt,
    PositiveInt,
    ValidationError,
    model_validator,
)
from tabulate import tabulate

from syncfifo.core import FifoConfig, SyncFifo
from syncfifo.dv import (
    FifoEnv,
    FifoRandomSequence,
    FifoRunResults,
    FifoScoreboard,
    FifoScriptedSequence,
    FifoSequence,
)
from syncfifo.utils import configure_logger, green, normalize_seed, red


class StepModel(BaseModel):
    """One scripted step; ``wr`` present means a write of that value."""

    model_config = ConfigDict(extra="forbid")

    reset: bool = False
    wr: NonNegativeInt | None = None
    rd: bool = False
    repeat: PositiveInt = 1


class RandomModel(BaseModel):
    """Random stimulus settings."""

    model_config = ConfigDict(extra="forbid")

    ticks: PositiveInt = 200
    write_prob: float = Field(default=0.5, ge=0.0, le=1.0)
    read_prob: float = Field(default=0.5, ge=0.0, le=1.0)
    reset_prob: float = Field(default=0.0, ge=0.0, le=1.0)
    protocol_aware: bool = False


class ScenarioModel(BaseModel):
    """Scenario file schema."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    capacity: int | None = None
    address_width: PositiveInt | None = None
    element_width: PositiveInt = 8
    steps: list[StepModel] | None = None
    random: RandomModel | None = None
    seed: int | str | None = None

    @model_validator(mode="after")
    def _check_choices(self) -> "ScenarioModel":
        if (self.capacity is None) == (self.address_width is None):
            raise ValueError("give exactly one of 'capacity' or 'address_width'")
        if (self.steps is None) == (self.random is None):
            raise ValueError("give exactly one of 'steps' or 'random'")
        if self.steps is not None and not self.steps:
            raise ValueError("'steps' must not be empty")
        return self

    @property
    def stimulus(self) -> Literal["scripted", "random"]:
        return "scripted" if self.steps is not None else "random"

    def fifo_config(self, default_name: str) -> FifoConfig:
        name = self.name or default_name
        if self.address_width is not None:
            return FifoConfig.from_address_width(
                self.address_width, self.element_width, name=name
            )
        return FifoConfig(
            capacity=cast(int, self.capacity),
            element_width=self.element_width,
            name=name,
        )


def get_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    ap = argparse.ArgumentParser(
        description="Sync FIFO scenario simulator",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    ap.add_argument("spec", nargs="+", help="YAML scenario file path(s)")
    ap.add_argument("--outdir", help="output directory")
    ap.add_argument(
        "--seed",
        default=None,
        help="random seed (decimal, 0x..., or 'random'); overrides the file",
    )
    ap.add_argument("--no-plot", action="store_true", help="skip the occupancy plot")
    ap.add_argument(
        "--verbosity",
        choices=["critical", "error", "warning", "info", "debug"],
        default="info",
        help="logging level",
    )
    return ap.parse_args(argv)


def _get_subdirs(spec_files: Sequence[str]) -> list[str]:
    """
    Name one output subdirectory per scenario file.

    Names follow the file stem; a stem seen before gets a _2, _3, ... suffix
    so scenario files from different directories never share a directory.
    """
    names: list[str] = []
    for spec_file in spec_files:
        stem = Path(spec_file).stem
        name, n = stem, 1
        while name in names:
            n += 1
            name = f"{stem}_{n}"
        names.append(name)
    return names


def _get_outdir(spec_file: str, user_outdir: str | None, subdir: str | None) -> Path:
    """
    Clean and create the output directory for one scenario file.

    Uses --outdir if given (plus ``subdir`` when several files run),
    otherwise a directory named after the scenario file.
    """
    if user_outdir:
        outdir = Path(user_outdir)
        if subdir:
            outdir = outdir / subdir
    else:
        outdir = Path(f"out_syncfifo_{Path(spec_file).stem}")
    if outdir.exists():
        shutil.rmtree(outdir)
    outdir.mkdir(parents=True)
    return outdir


def _get_logger(outdir: Path, verbosity: str) -> logging.Logger:
    """Send log output to the console and to run.log in ``outdir``."""
    log_file = outdir / "run.log"
    logger = configure_logger(verbosity, log_file)
    logger.info("Logging to console and %s", log_file)
    return logger


def _get_scenario(spec_file: str, logger: logging.Logger) -> ScenarioModel:
    """Load and validate one YAML scenario file."""
    spec_path = Path(spec_file)
    if not spec_path.exists():
        raise SystemExit(f"ERROR: Spec file not found: {spec_file}")
    with open(spec_path, encoding="utf-8") as f:
        s = f.read()
    logger.debug("Input spec:\n%s", s)
    spec = yaml.safe_load(s)
    if not isinstance(spec, dict):
        raise SystemExit(f"ERROR: {spec_file}: top level must be a mapping")
    try:
        scenario = ScenarioModel.model_validate(spec)
    except ValidationError as exc:
        raise SystemExit(f"ERROR: {spec_file}: {exc}") from exc
    logger.debug("Loaded spec:\n%s", json.dumps(scenario.model_dump(), indent=2))
    return scenario


def _get_seed(scenario: ScenarioModel, cli_seed: str | None) -> int:
    """
    Pick the run seed.

    --seed overrides the scenario file; with neither the seed is 1.
    """
    raw = cli_seed if cli_seed is not None else scenario.seed
    return normalize_seed(random.Random(), str(raw if raw is not None else 1))


def _get_sequence(scenario: ScenarioModel, seed: int) -> FifoSequence:
    """Build a scripted or random sequence from the scenario stimulus."""
    if scenario.steps is not None:
        return FifoScriptedSequence(
            [step.model_dump(exclude_none=True) for step in scenario.steps]
        )
    rnd = cast(RandomModel, scenario.random)
    return FifoRandomSequence(
        seq_len=rnd.ticks,
        element_width=scenario.element_width,
        write_prob=rnd.write_prob,
        read_prob=rnd.read_prob,
        reset_prob=rnd.reset_prob,
        protocol_aware=rnd.protocol_aware,
        seed=seed,
    )


def _log_elapsed_time(
    start_time: float, spec_file: str, logger: logging.Logger
) -> None:
    """Log the time spent on one scenario file as H:MM:SS."""
    elapsed_time = time.time() - start_time
    hours, remainder = divmod(int(elapsed_time), 3600)
    minutes, seconds = divmod(remainder, 60)
    logger.info("Completed %s in %d:%02d:%02d", spec_file, hours, minutes, seconds)


def _write_summary(results: FifoRunResults, outdir: Path, name: str) -> None:
    """
    Print the run scalars as a table.

    The same table is written to <name>_summary.txt.
    """
    table = tabulate(
        results.summary_rows(), headers=["Metric", "Value"], tablefmt="github"
    )
    print(table)
    (outdir / f"{name}_summary.txt").write_text(table + "\n", encoding="utf-8")


def run_scenario(
    spec_file: str,
    outdir: Path,
    *,
    seed: str | None = None,
    plot: bool = True,
    logger: logging.Logger,
) -> FifoRunResults:
    """Run one scenario file and save its results in ``outdir``."""
    scenario = _get_scenario(spec_file, logger)
    name = scenario.name or Path(spec_file).stem
    try:
        config = scenario.fifo_config(name)
    except ValidationError as exc:
        raise SystemExit(f"ERROR: {spec_file}: {exc}") from exc
    logger.info("%s", config)

    scenario_seed = _get_seed(scenario, seed)
    if scenario.stimulus == "random":
        logger.info("seed: %d (0x%08x)", scenario_seed, scenario_seed)

    env = FifoEnv(
        SyncFifo(config),
        _get_sequence(scenario, scenario_seed),
        scoreboard=FifoScoreboard(fail_on_error=False),
    )
    results = env.run()
    results.save(outdir, name, plot=plot)
    _write_summary(results, outdir, name)
    return results


def main(argv: Sequence[str] | None = None) -> int:
    """Run every scenario file; return 1 if any of them failed."""
    args = get_args(argv)
    errors = 0
    multi = len(args.spec) > 1
    subdirs = _get_subdirs(args.spec)

    for spec_file, subdir in zip(args.spec, subdirs):
        start_time = time.time()
        outdir = _get_outdir(spec_file, args.outdir, subdir if multi else None)
        logger = _get_logger(outdir, args.verbosity)
        results = run_scenario(
            spec_file, outdir, seed=args.seed, plot=not args.no_plot, logger=logger
        )
        s = f"{results.name}: {results.passed=} err_cnt={results.err_cnt}"
        if results.passed:
            logger.info(green(s))
        else:
            logger.error(red(s))
            errors += 1
        _log_elapsed_time(start_time, spec_file, logger)

    return 1 if errors else 0


if __name__ == "__main__":
    raise SystemExit(main())
