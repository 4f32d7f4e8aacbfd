# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncfifo/utils.py

"""Utility functions for the simulator CLI and the verification kit."""

from __future__ import annotations

import logging
import random
import re
import time
from pathlib import Path
from typing import Sequence, Union

import matplotlib.pyplot as plt

RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
RESET = "\033[0m"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
SEED_WORDS = frozenset({"rand", "random", "auto"})


class NoColorFormatter(logging.Formatter):
    """Formatter that strips ANSI color codes from log messages."""

    ANSI_ESCAPE = re.compile(r"\033\[[0-9;]*m")

    def format(self, record: logging.LogRecord) -> str:
        """Format the record and strip ANSI codes."""
        formatted = super().format(record)
        return self.ANSI_ESCAPE.sub("", formatted)


class PlotLine:
    """Thin wrapper for per-cycle line plots (occupancy, flags)."""

    def __init__(
        self,
        outdir: Union[str, Path] = "output",
        figsize: tuple[int, int] = (10, 6),
    ):
        self.outdir = Path(outdir).resolve()
        self.outdir.mkdir(parents=True, exist_ok=True)
        self.figsize = figsize
        self.title: str | None = None
        self.xlabel: str = ""
        self.ylabel: str = ""
        self._initialized = False

    def _init_plot(self) -> None:
        if not self._initialized:
            plt.figure(figsize=self.figsize)
            self._initialized = True

    # pylint: disable=too-many-positional-arguments
    def add_line(  # pylint: disable=too-many-arguments
        self,
        xs: Sequence[float],
        ys: Sequence[float],
        label: str,
        color: str = "blue",
        linestyle: str = "-",
        drawstyle: str = "steps-post",
    ) -> None:
        """Add a labeled line; cycle data is drawn as steps by default."""
        self._init_plot()
        plt.plot(
            xs,
            ys,
            label=label,
            color=color,
            linestyle=linestyle,
            drawstyle=drawstyle,
            linewidth=1.5,
        )

    def set_labels(self, xlabel: str, ylabel: str, title: str = "") -> None:
        """Set plot title and axis labels."""
        self.xlabel = xlabel
        self.ylabel = ylabel
        self.title = title

    def format(self) -> None:
        """Apply grid, layout, labels, and legend."""
        plt.xlabel(self.xlabel)
        plt.ylabel(self.ylabel)
        if self.title:
            plt.title(self.title)
        plt.grid(True)
        plt.legend(loc="upper right")
        plt.tight_layout()

    def save(self, filename: str, fmt: str = "png") -> Path:
        """Save the plot to disk and release the figure."""
        path = self.outdir / f"{filename}.{fmt}"
        plt.savefig(path)
        plt.close()
        self._initialized = False
        logging.debug("Saved plot: %s", path)
        return path


def configure_logger(
    verbosity: str = "info", log_file: Path | None = None
) -> logging.Logger:
    """Route root logging to the console and, if given, to ``log_file``.

    Handlers left over from an earlier call are closed first, so repeated
    simulator runs in one process each get a fresh run.log. The console keeps
    ANSI colours; the file copy has them stripped.
    """
    level = verbosity.upper()
    root = logging.getLogger()
    root.setLevel(level)
    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()

    handlers: list[tuple[logging.Handler, type[logging.Formatter]]] = [
        (logging.StreamHandler(), logging.Formatter)
    ]
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        handlers.append((file_handler, NoColorFormatter))
    for handler, formatter_cls in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter_cls(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))
        root.addHandler(handler)

    return logging.getLogger(__name__)


def green(s: str) -> str:
    """Wrap text in green ANSI escape codes."""
    return f"{GREEN}{s}{RESET}"


def iso_utc() -> str:
    """Return current time in ISO8601 Z format (UTC)."""
    return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime())


def normalize_seed(rng: random.Random, s: str) -> int:
    """Turn a --seed string into a 32-bit int.

    Accepts decimal, 0x... hex, or one of rand/random/auto to draw a seed
    from ``rng``. Anything else exits with a message.
    """
    text = s.strip()
    if text.lower() in SEED_WORDS:
        return rng.getrandbits(32)
    try:
        value = int(text, 0)
    except ValueError as exc:
        raise SystemExit(
            f"[syncfifo-sim] Invalid seed '{s}'. Use decimal, 0x..., or 'random'."
        ) from exc
    return value & 0xFFFF_FFFF


def red(s: str) -> str:
    """Wrap text in red ANSI escape codes."""
    return f"{RED}{s}{RESET}"


def yellow(s: str) -> str:
    """Wrap text in yellow ANSI escape codes."""
    return f"{YELLOW}{s}{RESET}"
