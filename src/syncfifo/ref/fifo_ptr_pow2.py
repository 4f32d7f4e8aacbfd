# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncfifo/ref/fifo_ptr_pow2.py

"""Power-of-two-only pointer baselines.

Both baselines let the pointer registers overflow naturally at a power-of-two
boundary, which is what a fixed-width counter does in hardware. They only
work when the depth is ``2 ** address_width``.

MaskedPtrFifo:
    ``address_width``-bit pointers, one slot kept empty. Same flag equations
    as the core FIFO, with wraparound done by masking.

WrapBitPtrFifo:
    ``address_width + 1``-bit pointers. The extra top bit flips on every
    wrap, so pointers that match in the address bits but differ in the top
    bit mean "full". All ``2 ** address_width`` slots are usable.

Both sit on ReadFirstRam, so ``rd_data`` follows the head slot on every
edge instead of holding the last admitted read.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from syncfifo.core import DiagnosticSink, FifoDiagnostics, FifoInputs, FifoOutputs
from syncfifo.core.fifo_diag import report_refused

from .ram import ReadFirstRam

logger = logging.getLogger(__name__)


class Pow2PtrFifo(ABC):  # pylint: disable=too-many-instance-attributes
    """Shared tick logic for the power-of-two baselines."""

    def __init__(
        self,
        address_width: int = 3,
        element_width: int = 8,
        diagnostics: DiagnosticSink | None = None,
    ) -> None:
        if address_width < 1:
            raise ValueError(f"{address_width=}")
        self.address_width = address_width
        self.depth = 1 << address_width
        self.ram = ReadFirstRam(self.depth, element_width)
        self.diagnostics: DiagnosticSink = (
            diagnostics
            if diagnostics is not None
            else FifoDiagnostics(self.__class__.__name__)
        )
        self.wptr = 0
        self.rptr = 0
        self._tick = 0

    @property
    @abstractmethod
    def ptr_mask(self) -> int:
        """Mask applied after every pointer increment."""

    @property
    @abstractmethod
    def usable_depth(self) -> int:
        """Maximum number of elements held at once."""

    @property
    @abstractmethod
    def full(self) -> bool:
        """Full flag from the current pointers."""

    @property
    def empty(self) -> bool:
        return self.wptr == self.rptr

    @property
    def occupancy(self) -> int:
        return (self.wptr - self.rptr) & self.ptr_mask

    def addr(self, ptr: int) -> int:
        """RAM address selected by a pointer value."""
        return ptr & (self.depth - 1)

    def tick(self, inputs: FifoInputs) -> FifoOutputs:
        """Advance one clock edge."""
        tick = self._tick
        self._tick += 1

        if inputs.reset:
            self.wptr = 0
            self.rptr = 0
            rdata = self.ram.clock(False, 0, 0, 0)
            logger.debug("%s: tick %d reset", self.__class__.__name__, tick)
            return self._outputs(rdata)

        full, empty = self.full, self.empty
        we = inputs.wr_en and not full
        re = inputs.rd_en and not empty
        violation = report_refused(
            self.diagnostics,
            tick,
            wr_refused=inputs.wr_en and full,
            rd_refused=inputs.rd_en and empty,
            wptr=self.wptr,
            rptr=self.rptr,
        )

        rdata = self.ram.clock(
            we, self.addr(self.wptr), inputs.wr_data, self.addr(self.rptr)
        )
        if we:
            self.wptr = (self.wptr + 1) & self.ptr_mask
        if re:
            self.rptr = (self.rptr + 1) & self.ptr_mask

        return self._outputs(rdata, wr_ack=we, rd_valid=re, violation=violation)

    def _outputs(
        self,
        rdata: int,
        *,
        wr_ack: bool = False,
        rd_valid: bool = False,
        violation: bool = False,
    ) -> FifoOutputs:
        return FifoOutputs(
            rd_data=rdata,
            full=self.full,
            empty=self.empty,
            wr_ack=wr_ack,
            rd_valid=rd_valid,
            occupancy=self.occupancy,
            violation=violation,
        )


class MaskedPtrFifo(Pow2PtrFifo):
    """One-slot-empty FIFO with ``address_width``-bit overflowing pointers."""

    @property
    def ptr_mask(self) -> int:
        return self.depth - 1

    @property
    def usable_depth(self) -> int:
        return self.depth - 1

    @property
    def full(self) -> bool:
        return ((self.wptr + 1) & self.ptr_mask) == self.rptr


class WrapBitPtrFifo(Pow2PtrFifo):
    """Full-depth FIFO whose pointers carry an extra wrap bit."""

    @property
    def ptr_mask(self) -> int:
        return (self.depth << 1) - 1

    @property
    def usable_depth(self) -> int:
        return self.depth

    @property
    def full(self) -> bool:
        return (self.wptr ^ self.rptr) == self.depth
