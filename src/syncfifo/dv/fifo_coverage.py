# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncfifo/dv/fifo_coverage.py


"""Coverage."""

from __future__ import annotations

import logging

from .fifo_item import FifoItem


class FifoCoverage:  # pylint: disable=too-many-instance-attributes
    """Track write/read activity and flag states from observed items."""

    def __init__(self, name: str = "sync_fifo_coverage") -> None:
        self.name = name
        self.logger = logging.getLogger(f"{__name__}.{name}")
        self.total: int = 0
        self.resets: int = 0
        self.writes: int = 0
        self.reads: int = 0
        self.simultaneous: int = 0
        self.full_hits: int = 0
        self.empty_hits: int = 0
        self.write_while_full: int = 0
        self.read_while_empty: int = 0

    def sample(self, tt: FifoItem) -> None:
        """Update counters from an observed (actual) item."""
        self.total += 1
        if tt.reset:
            self.resets += 1
            return
        if tt.wr_ack:
            self.writes += 1
        if tt.rd_valid:
            self.reads += 1
        if tt.wr_ack and tt.rd_valid:
            self.simultaneous += 1
        if tt.wr_en and not tt.wr_ack:
            self.write_while_full += 1
        if tt.rd_en and not tt.rd_valid:
            self.read_while_empty += 1
        if tt.full:
            self.full_hits += 1
        if tt.empty:
            self.empty_hits += 1

    def to_dict(self) -> dict[str, int]:
        return {k: v for k, v in vars(self).items() if isinstance(v, int)}

    def report(self) -> None:
        """Log coverage summary."""
        self.logger.info(
            "FifoCoverage summary:"
            " total=%d writes=%d reads=%d simultaneous=%d full=%d empty=%d"
            " resets=%d write_while_full=%d read_while_empty=%d",
            self.total,
            self.writes,
            self.reads,
            self.simultaneous,
            self.full_hits,
            self.empty_hits,
            self.resets,
            self.write_while_full,
            self.read_while_empty,
        )
