# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncfifo/core/fifo_state.py

"""Immutable register snapshot of the FIFO."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FifoState:
    """Write pointer, read pointer and latched output.

    Instances are never mutated: the pointer units return new snapshots,
    so a pre-tick snapshot stays intact while both sides of a tick are
    evaluated against it. Slot contents live in a SlotArray next to the
    snapshot and are only written when a tick commits.
    """

    capacity: int
    wptr: int
    rptr: int
    rdata: int = 0

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError(f"{self.capacity=}")
        if not 0 <= self.wptr < self.capacity:
            raise ValueError(f"{self.wptr=} out of range for {self.capacity=}")
        if not 0 <= self.rptr < self.capacity:
            raise ValueError(f"{self.rptr=} out of range for {self.capacity=}")

    @classmethod
    def initial(cls, capacity: int) -> "FifoState":
        """Zero pointers and output."""
        return cls(capacity=capacity, wptr=0, rptr=0)

    def to_dict(self) -> dict[str, object]:
        """Structured view for logging/JSON."""
        return {
            "capacity": self.capacity,
            "wptr": self.wptr,
            "rptr": self.rptr,
            "rdata": self.rdata,
        }
