# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncfifo/dv/__init__.py

"""Design verification kit for the sync FIFO model.

Components:
- fifo_item: FifoItem per-tick transaction (inputs + outputs)
- fifo_sequence: Random and scripted stimulus sequences
- fifo_ref_model: Queue-based golden model
- fifo_sb: In-order scoreboard
- fifo_coverage: Activity and flag coverage counters
- fifo_results: Run results (JSON scalars, CSV trace, occupancy plot)
- fifo_env: Environment wiring the above to a SyncFifo

To run a scenario file:
    syncfifo-sim src/syncfifo/tools/fifo_sim_examples/scenario_b.yaml
"""

from __future__ import annotations

from .fifo_coverage import FifoCoverage
from .fifo_env import FifoEnv
from .fifo_item import FifoItem
from .fifo_ref_model import FifoRefModel
from .fifo_results import FifoRunResults
from .fifo_sb import FifoScoreboard
from .fifo_sequence import FifoRandomSequence, FifoScriptedSequence, FifoSequence

__all__ = (
    "FifoCoverage",
    "FifoEnv",
    "FifoItem",
    "FifoRandomSequence",
    "FifoRefModel",
    "FifoRunResults",
    "FifoScoreboard",
    "FifoScriptedSequence",
    "FifoSequence",
)
