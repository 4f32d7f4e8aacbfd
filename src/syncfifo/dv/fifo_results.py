# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncfifo/dv/fifo_results.py

"""Results of one environment run: scalars, per-tick trace, occupancy plot."""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path

from syncfifo.utils import PlotLine, iso_utc

logger = logging.getLogger(__name__)

TRACE_FIELDS: tuple[str, ...] = (
    "tick",
    "reset",
    "wr_en",
    "wr_data",
    "rd_en",
    "rd_data",
    "wr_ack",
    "rd_valid",
    "full",
    "empty",
    "occupancy",
    "violation",
)


class FifoRunResults:  # pylint: disable=too-many-instance-attributes
    """Container for a finished run with save helpers."""

    def __init__(self, name: str, capacity: int, element_width: int) -> None:
        self.name = name
        self.capacity = capacity
        self.element_width = element_width
        self.ticks: int = 0
        self.vect_cnt: int = 0
        self.pass_cnt: int = 0
        self.err_cnt: int = 0
        self.passed: bool = False
        self.occ_peak: int = 0
        self.violations: int = 0
        self.timestamp: str = iso_utc()
        self.coverage: dict[str, int] = {}
        self.trace: list[dict[str, int | bool]] = []

    def add_tick(self, row: dict[str, int | bool]) -> None:
        self.trace.append(row)
        self.ticks = len(self.trace)
        self.occ_peak = max(self.occ_peak, int(row["occupancy"]))
        if row["violation"]:
            self.violations += 1

    @property
    def occ_seq(self) -> list[int]:
        return [int(row["occupancy"]) for row in self.trace]

    def __str__(self) -> str:
        return self.scalars_to_str()

    def scalars_to_dict(self) -> dict[str, int | float | str | bool]:
        """Scalar attributes plus coverage counters flattened with a cov_ prefix."""
        result: dict[str, int | float | str | bool] = {}
        for key, value in vars(self).items():
            if key.startswith("_"):
                continue
            if isinstance(value, (int, float, str, bool)):
                result[key] = value
        for key, value in self.coverage.items():
            result[f"cov_{key}"] = value
        return result

    def scalars_to_str(self) -> str:
        return json.dumps(self.scalars_to_dict(), indent=2)

    def summary_rows(self) -> list[list[object]]:
        """Two-column rows for a console table."""
        return [[k, v] for k, v in self.scalars_to_dict().items()]

    def save_scalars(self, outdir: Path, name: str) -> Path:
        path = outdir / f"{name}_results.json"
        path.write_text(json.dumps(self.scalars_to_dict(), indent=2) + "\n")
        return path

    def save_trace(self, outdir: Path, name: str) -> Path:
        """Save the per-tick trace to a CSV file."""
        path = outdir / f"{name}_trace.csv"
        with path.open("w", newline="", encoding="utf-8") as f:
            wr = csv.DictWriter(f, fieldnames=list(TRACE_FIELDS))
            wr.writeheader()
            for row in self.trace:
                wr.writerow({k: int(row[k]) for k in TRACE_FIELDS})
        return path

    def save_plot(self, outdir: Path, name: str) -> Path:
        """Plot occupancy against the usable-depth ceiling."""
        xs = list(range(len(self.trace)))
        p = PlotLine(outdir)
        p.add_line(xs, self.occ_seq, label="Occupancy", color="blue")
        p.add_line(
            xs,
            [self.capacity - 1] * len(xs),
            label="Usable depth",
            color="red",
            linestyle="--",
        )
        p.set_labels("Tick", "Elements", f"{self.name}: FIFO occupancy")
        p.format()
        return p.save(f"{name}_plot")

    def save(self, outdir: Path, name: str, plot: bool = True) -> None:
        """Save scalars, trace and (optionally) the plot."""
        self.save_scalars(outdir, name)
        self.save_trace(outdir, name)
        if plot:
            self.save_plot(outdir, name)
        logger.info("Saved results for %s to %s", name, outdir)
