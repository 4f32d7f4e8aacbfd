# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: tests/test_fifo_flags.py

"""Status flag generator and state snapshot."""

from __future__ import annotations

import pytest

from syncfifo.core import FifoState, flags, is_empty, is_full, next_ptr, occupancy, wrap


def _state(capacity: int, wptr: int, rptr: int) -> FifoState:
    return FifoState(capacity=capacity, wptr=wptr, rptr=rptr)


def test_wrap_only_folds_at_capacity() -> None:
    assert wrap(9, 9) == 0
    assert wrap(8, 9) == 8
    assert wrap(0, 9) == 0


@pytest.mark.parametrize("capacity", [2, 3, 5, 7, 8, 9, 12, 16, 17])
def test_next_ptr_cycles_through_every_slot(capacity: int) -> None:
    p = 0
    seen = []
    for _ in range(capacity):
        seen.append(p)
        p = next_ptr(p, capacity)
    assert p == 0
    assert seen == list(range(capacity))


def test_initial_state_is_empty_not_full() -> None:
    s = FifoState.initial(9)
    assert is_empty(s)
    assert not is_full(s)
    assert occupancy(s) == 0
    assert flags(s) == (False, True)


def test_full_without_wrap() -> None:
    s = _state(9, wptr=8, rptr=0)
    assert is_full(s)
    assert not is_empty(s)
    assert occupancy(s) == 8


def test_full_across_wrap_boundary() -> None:
    s = _state(9, wptr=3, rptr=4)
    assert is_full(s)
    assert occupancy(s) == 8


def test_partial_occupancy_across_wrap() -> None:
    s = _state(9, wptr=2, rptr=7)
    assert not is_full(s)
    assert not is_empty(s)
    assert occupancy(s) == 4


@pytest.mark.parametrize("capacity", [2, 3, 4, 9, 10])
def test_full_and_empty_never_both_true(capacity: int) -> None:
    for w in range(capacity):
        for r in range(capacity):
            f = flags(_state(capacity, w, r))
            assert not (f.full and f.empty)
            assert occupancy(_state(capacity, w, r)) <= capacity - 1


def test_single_slot_is_both_full_and_empty() -> None:
    # This is why FifoConfig refuses capacity 1.
    s = FifoState.initial(1)
    assert is_full(s) and is_empty(s)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"capacity": 0, "wptr": 0, "rptr": 0},
        {"capacity": 4, "wptr": 4, "rptr": 0},
        {"capacity": 4, "wptr": 0, "rptr": -1},
        {"capacity": 3, "wptr": 0, "rptr": 3},
    ],
)
def test_state_rejects_bad_registers(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        FifoState(**kwargs)
