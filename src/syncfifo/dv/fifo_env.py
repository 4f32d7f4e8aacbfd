# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncfifo/dv/fifo_env.py

"""Top-level verification environment for the sync FIFO model.

Per tick:

    sequence ──item──► SyncFifo.tick ──actual──┐
          │                                    ├─► scoreboard
          └──item──► FifoRefModel.calc_exp ────┘
                                   actual ──► coverage

The sequence sees the flags from before the tick, the same snapshot the
FIFO uses for admission.
"""

from __future__ import annotations

import logging

from syncfifo.core import SyncFifo

from .fifo_coverage import FifoCoverage
from .fifo_ref_model import FifoRefModel
from .fifo_results import FifoRunResults
from .fifo_sb import FifoScoreboard
from .fifo_sequence import FifoSequence

logger = logging.getLogger(__name__)


class FifoEnv:  # pylint: disable=too-few-public-methods
    """Drives one sequence through a SyncFifo and checks every tick."""

    def __init__(
        self,
        fifo: SyncFifo,
        sequence: FifoSequence,
        *,
        ref_model: FifoRefModel | None = None,
        scoreboard: FifoScoreboard | None = None,
        coverage: FifoCoverage | None = None,
    ) -> None:
        self.fifo = fifo
        self.sequence = sequence
        self.ref_model = ref_model or FifoRefModel(
            fifo.capacity, fifo.config.element_width
        )
        self.scoreboard = scoreboard or FifoScoreboard()
        self.coverage = coverage or FifoCoverage()

    def run(self) -> FifoRunResults:
        """Run the whole sequence and return the collected results."""
        cfg = self.fifo.config
        results = FifoRunResults(cfg.name, cfg.capacity, cfg.element_width)
        logger.info(
            "Running %s: %d ticks on %s (capacity=%d, element_width=%d)",
            self.sequence.name,
            len(self.sequence),
            cfg.name,
            cfg.capacity,
            cfg.element_width,
        )

        for index in range(len(self.sequence)):
            status = self.fifo.peek_flags()
            item = self.sequence.next_item(index, status)
            exp = self.ref_model.calc_exp(item)

            outputs = self.fifo.tick(item.to_inputs())
            act = item.clone()
            act.set_outputs(outputs)

            self.scoreboard.compare(exp, act, self.ref_model.snapshot_state())
            self.coverage.sample(act)

            row: dict[str, int | bool] = {"tick": index}
            row.update(
                reset=item.reset,
                wr_en=item.wr_en,
                wr_data=item.wr_data,
                rd_en=item.rd_en,
            )
            row.update(outputs.to_dict())
            results.add_tick(row)

        self.coverage.report()
        results.passed = self.scoreboard.report()
        results.vect_cnt = self.scoreboard.vect_cnt
        results.pass_cnt = self.scoreboard.pass_cnt
        results.err_cnt = self.scoreboard.err_cnt
        results.coverage = self.coverage.to_dict()
        return results
