# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncfifo/core/__init__.py

"""Core synchronous FIFO model.

Modules:
- fifo_config: FifoConfig (capacity, element width, address-width mapping)
- fifo_state: FifoState immutable register snapshot
- fifo_storage: SlotArray slot storage and SlotWrite candidates
- fifo_flags: Status flag generator (wrap, next_ptr, is_full, is_empty)
- fifo_ptr: Write/read pointer units and reset controller
- fifo_diag: Usage-violation events and the logging diagnostic sink
- sync_fifo: SyncFifo per-tick state machine
"""

from __future__ import annotations

from .fifo_config import FifoConfig
from .fifo_diag import DiagnosticSink, FifoDiagnostics, FifoViolation, ViolationKind
from .fifo_flags import FifoFlags, flags, is_empty, is_full, next_ptr, occupancy, wrap
from .fifo_ptr import reset, try_read, try_write
from .fifo_state import FifoState
from .fifo_storage import SlotArray, SlotWrite
from .sync_fifo import FifoInputs, FifoOutputs, SyncFifo

__all__ = (
    "DiagnosticSink",
    "FifoConfig",
    "FifoDiagnostics",
    "FifoFlags",
    "FifoInputs",
    "FifoOutputs",
    "FifoState",
    "FifoViolation",
    "SlotArray",
    "SlotWrite",
    "SyncFifo",
    "ViolationKind",
    "flags",
    "is_empty",
    "is_full",
    "next_ptr",
    "occupancy",
    "reset",
    "try_read",
    "try_write",
    "wrap",
)
