# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncfifo/dv/fifo_ref_model.py

"""Sync FIFO reference model (queue-based).

This model ignores pointers altogether and keeps a logical queue of at most
``capacity - 1`` elements:

* Reset:
  - Clear the queue and the latched output. Nothing else happens that tick.

* Writes:
  - Admitted when wr_en == 1 and the queue held fewer than capacity - 1
    elements before the tick.

* Reads:
  - Admitted when rd_en == 1 and the queue was non-empty before the tick.
    The head element becomes the new latched output. A refused or idle read
    leaves the previous output in place.

Both decisions use the occupancy from before the tick, so a write and a read
on the same tick never see each other.
"""

from __future__ import annotations

import logging
from collections import deque

from .fifo_item import FifoItem


class FifoRefModel:  # pylint: disable=too-many-instance-attributes
    """Golden model for predicting FifoItem outputs."""

    def __init__(
        self, capacity: int, element_width: int = 8, name: str = "sync_fifo_ref_model"
    ) -> None:
        if capacity < 2:
            raise ValueError(f"{capacity=}")
        self.name = name
        self._logger: logging.Logger = logging.getLogger(f"{__name__}.{name}")
        self.capacity = capacity
        self.data_mask: int = (1 << element_width) - 1

        self._fifo: deque[int] = deque()
        self._rdata: int = 0

        self._writes_accepted: int = 0
        self._writes_dropped: int = 0
        self._reads_accepted: int = 0
        self._reads_blocked: int = 0

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @property
    def usable_depth(self) -> int:
        return self.capacity - 1

    def __len__(self) -> int:
        return len(self._fifo)

    def reset_change(self) -> None:
        """Clear the queue and latched output."""
        self.logger.debug("reset")
        self._fifo.clear()
        self._rdata = 0

    def snapshot_state(self) -> dict[str, int]:
        """Return a snapshot of logical FIFO state for debug."""
        return {
            "fifo_len": len(self._fifo),
            "capacity": self.capacity,
            "rdata": self._rdata,
            "writes_accepted": self._writes_accepted,
            "writes_dropped": self._writes_dropped,
            "reads_accepted": self._reads_accepted,
            "reads_blocked": self._reads_blocked,
        }

    def calc_exp(self, tr: FifoItem) -> FifoItem:
        """Return a clone of ``tr`` with its expected output fields filled in."""
        exp = tr.clone()

        if tr.reset:
            self.reset_change()
            exp.wr_ack = False
            exp.rd_valid = False
            self._set_status(exp)
            return exp

        pre_len = len(self._fifo)
        write_en = tr.wr_en and pre_len < self.usable_depth
        read_en = tr.rd_en and pre_len > 0

        if read_en:
            self._rdata = self._fifo.popleft()
            self._reads_accepted += 1
            self.logger.debug(
                "REF READ: rdata=0x%x, fifo_len=%d", self._rdata, len(self._fifo)
            )
        elif tr.rd_en:
            self._reads_blocked += 1

        if write_en:
            self._fifo.append(tr.wr_data & self.data_mask)
            self._writes_accepted += 1
            self.logger.debug(
                "REF WRITE: wdata=0x%x, fifo_len=%d", tr.wr_data, len(self._fifo)
            )
        elif tr.wr_en:
            self._writes_dropped += 1

        exp.wr_ack = write_en
        exp.rd_valid = read_en
        self._set_status(exp)
        return exp

    def _set_status(self, exp: FifoItem) -> None:
        exp.rd_data = self._rdata
        exp.full = len(self._fifo) == self.usable_depth
        exp.empty = len(self._fifo) == 0
