# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncfifo/ref/__init__.py

"""Reference collaborators around the core FIFO.

Modules:
- ram: Read-first storage array with an unconditional registered read port
- fifo_ptr_pow2: Power-of-two-only pointer baselines (masked, wrap-bit)
- fifo_wrapper: Address-width parameterised wrapper around SyncFifo
"""

from __future__ import annotations

from .fifo_ptr_pow2 import MaskedPtrFifo, WrapBitPtrFifo
from .fifo_wrapper import FifoWrapper
from .ram import ReadFirstRam

__all__ = (
    "FifoWrapper",
    "MaskedPtrFifo",
    "ReadFirstRam",
    "WrapBitPtrFifo",
)
