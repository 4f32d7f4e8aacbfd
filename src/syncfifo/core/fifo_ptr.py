# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncfifo/core/fifo_ptr.py

"""Write pointer unit, read pointer unit and reset controller.

Each function takes a snapshot and returns a new one; a refused request
returns the input snapshot itself, so nothing about it can change.

The write unit does not touch the slot array. It hands back a SlotWrite
candidate that the tick commits after the read unit has sampled the array,
so both units see the same pre-tick contents. An admitted write and an
admitted read never address the same slot in one tick: the write needs
``!full`` and the read needs ``!empty``, so ``wptr != rptr`` whenever both
are admitted.
"""

from __future__ import annotations

from dataclasses import replace

from .fifo_flags import is_empty, is_full, next_ptr
from .fifo_state import FifoState
from .fifo_storage import SlotArray, SlotWrite


def try_write(state: FifoState, data: int) -> tuple[FifoState, SlotWrite | None]:
    """Claim the slot at the write pointer and advance it, unless full.

    Returns:
        (new_state, write candidate or None). The write is accepted iff the
        candidate is not None.
    """
    if is_full(state):
        return state, None
    new_state = replace(state, wptr=next_ptr(state.wptr, state.capacity))
    return new_state, SlotWrite(state.wptr, data)


def try_read(state: FifoState, slots: SlotArray) -> tuple[FifoState, int | None]:
    """Latch the element at the read pointer and advance it, unless empty.

    When empty the previous output stays latched and None is returned to
    signal that no new data was produced.

    Returns:
        (new_state, value or None)
    """
    if is_empty(state):
        return state, None
    value = slots.read(state.rptr)
    new_state = replace(
        state,
        rdata=value,
        rptr=next_ptr(state.rptr, state.capacity),
    )
    return new_state, value


def reset(state: FifoState) -> FifoState:
    """Zero both pointers and the latched output. Slot contents are kept."""
    return replace(state, wptr=0, rptr=0, rdata=0)
