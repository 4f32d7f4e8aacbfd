# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncfifo/core/sync_fifo.py

"""Per-tick state machine of the synchronous FIFO.

Every tick follows the same three steps:

1. If reset is asserted, zero the pointers and output and stop there. No
   admission logic runs on a reset tick.
2. Take the pre-tick snapshot and derive full/empty from it.
3. Evaluate the write side and the read side independently against that
   same snapshot, then commit both at once: the write side contributes
   ``wptr`` and one slot write, the read side ``rptr``/``rdata``. The read
   samples the slot array before the slot write lands.

Because neither side sees the other's result, a write and a read in the
same tick behave like two flops clocked by the same edge. With one element
held, a simultaneous write and read returns the old element and appends the
new one, leaving occupancy unchanged.

Example:
    >>> fifo = SyncFifo(FifoConfig(capacity=5))
    >>> fifo.write(0x11).empty
    False
    >>> fifo.read().rd_data
    17
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, replace

from .fifo_config import FifoConfig
from .fifo_diag import DiagnosticSink, FifoDiagnostics, report_refused
from .fifo_flags import FifoFlags, flags, occupancy
from .fifo_ptr import reset, try_read, try_write
from .fifo_state import FifoState
from .fifo_storage import SlotArray

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FifoInputs:
    """Requests presented to the FIFO for one tick."""

    reset: bool = False
    wr_en: bool = False
    wr_data: int = 0
    rd_en: bool = False


@dataclass(frozen=True)
class FifoOutputs:  # pylint: disable=too-many-instance-attributes
    """Registered outputs visible after a tick.

    ``rd_data`` is the latched output register. It changes only on an
    admitted read and otherwise holds its previous value. ``full``,
    ``empty`` and ``occupancy`` describe the committed state.
    """

    rd_data: int
    full: bool
    empty: bool
    wr_ack: bool = False
    rd_valid: bool = False
    occupancy: int = 0
    violation: bool = False

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


class SyncFifo:
    """Arbitrary-capacity synchronous FIFO.

    The instance is the only owner of its state; all changes go through
    tick() (or the one-tick helpers built on it).
    """

    def __init__(
        self,
        config: FifoConfig,
        diagnostics: DiagnosticSink | None = None,
    ) -> None:
        self.config = config
        self.diagnostics: DiagnosticSink = (
            diagnostics if diagnostics is not None else FifoDiagnostics(config.name)
        )
        self._state = FifoState.initial(config.capacity)
        self._slots = SlotArray(config.capacity)
        self._tick = 0
        logger.debug("Created %s", config.model_dump())

    @classmethod
    def from_capacity(
        cls,
        capacity: int,
        element_width: int = 8,
        diagnostics: DiagnosticSink | None = None,
    ) -> "SyncFifo":
        return cls(
            FifoConfig(capacity=capacity, element_width=element_width), diagnostics
        )

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def capacity(self) -> int:
        return self.config.capacity

    @property
    def state(self) -> FifoState:
        """Current committed snapshot."""
        return self._state

    @property
    def storage(self) -> tuple[int, ...]:
        """Copy of the slot array contents."""
        return self._slots.contents()

    @property
    def tick_count(self) -> int:
        """Number of ticks processed so far."""
        return self._tick

    @property
    def full(self) -> bool:
        return self.peek_flags().full

    @property
    def empty(self) -> bool:
        return self.peek_flags().empty

    @property
    def occupancy(self) -> int:
        return occupancy(self._state)

    @property
    def rd_data(self) -> int:
        return self._state.rdata

    def peek_flags(self) -> FifoFlags:
        """Flags for the current snapshot, without advancing time."""
        return flags(self._state)

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    def tick(self, inputs: FifoInputs) -> FifoOutputs:
        """Advance one clock edge."""
        tick = self._tick
        self._tick += 1
        snap = self._state

        if inputs.reset:
            self._state = reset(snap)
            logger.debug(
                "%s: tick %d reset from %s", self.config.name, tick, snap.to_dict()
            )
            return self._outputs()

        wr_data = inputs.wr_data & self.config.data_mask
        w_state, slot_write = try_write(snap, wr_data) if inputs.wr_en else (snap, None)
        r_state, value = try_read(snap, self._slots) if inputs.rd_en else (snap, None)
        wr_ack = slot_write is not None
        rd_valid = value is not None

        violation = report_refused(
            self.diagnostics,
            tick,
            wr_refused=inputs.wr_en and not wr_ack,
            rd_refused=inputs.rd_en and not rd_valid,
            wptr=snap.wptr,
            rptr=snap.rptr,
        )

        self._slots.commit(slot_write)
        self._state = replace(
            snap,
            wptr=w_state.wptr,
            rptr=r_state.rptr,
            rdata=r_state.rdata,
        )

        if wr_ack:
            logger.debug(
                "%s: tick %d write 0x%x @%d", self.config.name, tick, wr_data, snap.wptr
            )
        if rd_valid:
            logger.debug(
                "%s: tick %d read 0x%x @%d", self.config.name, tick, value, snap.rptr
            )

        return self._outputs(wr_ack=wr_ack, rd_valid=rd_valid, violation=violation)

    def _outputs(
        self, *, wr_ack: bool = False, rd_valid: bool = False, violation: bool = False
    ) -> FifoOutputs:
        f = flags(self._state)
        return FifoOutputs(
            rd_data=self._state.rdata,
            full=f.full,
            empty=f.empty,
            wr_ack=wr_ack,
            rd_valid=rd_valid,
            occupancy=occupancy(self._state),
            violation=violation,
        )

    # ------------------------------------------------------------------
    # One-tick helpers
    # ------------------------------------------------------------------

    def write(self, data: int) -> FifoOutputs:
        return self.tick(FifoInputs(wr_en=True, wr_data=data))

    def read(self) -> FifoOutputs:
        return self.tick(FifoInputs(rd_en=True))

    def write_read(self, data: int) -> FifoOutputs:
        """Request a write and a read on the same tick."""
        return self.tick(FifoInputs(wr_en=True, wr_data=data, rd_en=True))

    def idle(self) -> FifoOutputs:
        return self.tick(FifoInputs())

    def assert_reset(self) -> FifoOutputs:
        return self.tick(FifoInputs(reset=True))
