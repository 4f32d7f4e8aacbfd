# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncfifo/core/fifo_flags.py

"""Status flag generator.

Full and empty are pure functions of the two pointers and the capacity.
Pointer advance wraps by comparing against the capacity instead of relying
on binary overflow, so the flags are correct for any capacity, including
ones that are not powers of two.

    empty = wptr == rptr
    full  = wrap(wptr + 1) == rptr

One slot is always left unused: with N slots at most N - 1 elements are
held, so equal pointers can only mean "empty".
"""

from __future__ import annotations

from typing import NamedTuple

from .fifo_state import FifoState


class FifoFlags(NamedTuple):
    """Full/empty pair computed from one snapshot."""

    full: bool
    empty: bool


def wrap(x: int, capacity: int) -> int:
    """Fold ``x`` back into ``[0, capacity)`` after a single-step advance."""
    return x - capacity if x == capacity else x


def next_ptr(ptr: int, capacity: int) -> int:
    """Pointer value after one advance."""
    return wrap(ptr + 1, capacity)


def is_empty(state: FifoState) -> bool:
    return state.wptr == state.rptr


def is_full(state: FifoState) -> bool:
    return next_ptr(state.wptr, state.capacity) == state.rptr


def occupancy(state: FifoState) -> int:
    """Number of elements currently held."""
    return (state.wptr - state.rptr) % state.capacity


def flags(state: FifoState) -> FifoFlags:
    return FifoFlags(full=is_full(state), empty=is_empty(state))
