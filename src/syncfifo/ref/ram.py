# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncfifo/ref/ram.py

"""Read-first storage array.

This is the plain register-file memory that the power-of-two baselines sit
on. Its read port is registered and re-samples ``mem[raddr]`` on every
clock edge, whether or not anyone asked for a read. When a write and the
read hit the same address on one edge, the read returns the old contents.

That discipline differs from the core FIFO, whose output register only
loads on an admitted read.
"""

from __future__ import annotations


class ReadFirstRam:
    """Single-clock RAM with one write port and one registered read port."""

    def __init__(self, depth: int, width: int = 8) -> None:
        if depth < 1:
            raise ValueError(f"{depth=}")
        if width < 1:
            raise ValueError(f"{width=}")
        self.depth = depth
        self.width = width
        self._mask = (1 << width) - 1
        self._mem: list[int] = [0] * depth
        self.rdata: int = 0

    def _check(self, index: int) -> None:
        if not 0 <= index < self.depth:
            raise IndexError(f"address {index} out of range [0, {self.depth})")

    def read(self, index: int) -> int:
        """Combinational peek at one slot."""
        self._check(index)
        return self._mem[index]

    def write(self, index: int, value: int) -> None:
        """Store ``value`` (truncated to the port width) in one slot."""
        self._check(index)
        self._mem[index] = value & self._mask

    def clock(self, we: bool, waddr: int, wdata: int, raddr: int) -> int:
        """One clock edge: sample the read port, then apply the write."""
        self.rdata = self.read(raddr)
        if we:
            self.write(waddr, wdata)
        return self.rdata

    def contents(self) -> tuple[int, ...]:
        return tuple(self._mem)
