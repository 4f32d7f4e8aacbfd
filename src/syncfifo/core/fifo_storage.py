# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncfifo/core/fifo_storage.py

"""Slot array behind the FIFO pointers."""

from __future__ import annotations

from typing import NamedTuple


class SlotWrite(NamedTuple):
    """A write candidate: the slot to store into and the value to store."""

    index: int
    value: int


class SlotArray:
    """Fixed-size array of elements with O(1) indexed access.

    Passive: no flags, no pointers, no buffering. Only the tick state
    machine writes to it, and only at commit time.
    """

    def __init__(self, capacity: int, fill: int = 0) -> None:
        if capacity < 1:
            raise ValueError(f"{capacity=}")
        self._slots: list[int] = [fill] * capacity

    def __len__(self) -> int:
        return len(self._slots)

    def read(self, index: int) -> int:
        return self._slots[index]

    def write(self, index: int, value: int) -> None:
        self._slots[index] = value

    def commit(self, op: SlotWrite | None) -> None:
        """Apply a write candidate, if there is one."""
        if op is not None:
            self.write(op.index, op.value)

    def contents(self) -> tuple[int, ...]:
        """Copy of every slot, for inspection."""
        return tuple(self._slots)
