# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncfifo/dv/fifo_sequence.py

"""Stimulus sequences for sync FIFO verification.

A sequence hands out one FifoItem per tick. The environment passes in the
flags seen just before that tick so a protocol-aware sequence can avoid
writing while full or reading while empty; a sequence that ignores them
exercises the violation path instead.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, Mapping

from syncfifo.core import FifoFlags, FifoInputs

from .fifo_item import FifoItem


class FifoSequence:
    """Base class: make_item -> set_item_inputs, ``seq_len`` times.

    Subclasses must implement:
        set_item_inputs(item, index, status)
    """

    def __init__(self, name: str = "seq", seq_len: int = 100) -> None:
        self.name = name
        self.logger: logging.Logger = logging.getLogger(f"{__name__}.{name}")
        self.seq_len: int = max(1, int(seq_len))

    def __len__(self) -> int:
        return self.seq_len

    def make_item(self, index: int) -> FifoItem:
        return FifoItem(f"tr{index}")

    def next_item(self, index: int, status: FifoFlags) -> FifoItem:
        """Build the item for tick ``index``."""
        item = self.make_item(index)
        self.set_item_inputs(item, index, status)
        return item

    def set_item_inputs(self, item: FifoItem, index: int, status: FifoFlags) -> None:
        """Must be implemented in subclasses."""
        raise NotImplementedError


class FifoRandomSequence(FifoSequence):
    """Random writes, reads and (optionally) resets.

    With ``protocol_aware`` set, write requests are suppressed while full and
    read requests while empty, as a well-behaved producer/consumer would do.
    """

    # pylint: disable=too-many-positional-arguments
    def __init__(  # pylint: disable=too-many-arguments
        self,
        name: str = "sync_fifo_random_seq",
        seq_len: int = 200,
        *,
        element_width: int = 8,
        write_prob: float = 0.5,
        read_prob: float = 0.5,
        reset_prob: float = 0.0,
        protocol_aware: bool = False,
        seed: int | None = None,
    ) -> None:
        super().__init__(name, seq_len)
        for label, p in (
            ("write_prob", write_prob),
            ("read_prob", read_prob),
            ("reset_prob", reset_prob),
        ):
            if not 0.0 <= p <= 1.0:
                raise ValueError(f"{label} must be in [0, 1], got {p}")
        if element_width <= 0:
            raise ValueError("element_width must be > 0")
        self.element_width = element_width
        self.write_prob = write_prob
        self.read_prob = read_prob
        self.reset_prob = reset_prob
        self.protocol_aware = protocol_aware
        self.rng = random.Random(seed)

    def set_item_inputs(self, item: FifoItem, index: int, status: FifoFlags) -> None:
        if self.reset_prob and self.rng.random() < self.reset_prob:
            item.reset = True
            self.logger.debug("tr%d: random reset", index)
            return
        item.wr_en = self.rng.random() < self.write_prob
        item.rd_en = self.rng.random() < self.read_prob
        if self.protocol_aware:
            item.wr_en = item.wr_en and not status.full
            item.rd_en = item.rd_en and not status.empty
        if item.wr_en:
            item.wr_data = self.rng.getrandbits(self.element_width)


class FifoScriptedSequence(FifoSequence):
    """Replays a fixed list of per-tick inputs.

    Steps may be FifoInputs or mappings with any of the keys ``reset``,
    ``wr`` (write data; presence means write), ``rd`` and ``repeat``.
    """

    def __init__(
        self,
        steps: Iterable[FifoInputs | Mapping[str, object]],
        name: str = "sync_fifo_scripted_seq",
    ) -> None:
        self.steps: list[FifoInputs] = []
        for step in steps:
            self.steps.extend(self._expand(step))
        if not self.steps:
            raise ValueError("scripted sequence needs at least one step")
        super().__init__(name, len(self.steps))

    @staticmethod
    def _expand(step: FifoInputs | Mapping[str, object]) -> list[FifoInputs]:
        if isinstance(step, FifoInputs):
            return [step]
        unknown = set(step) - {"reset", "wr", "rd", "repeat"}
        if unknown:
            raise ValueError(f"unknown step keys: {sorted(unknown)}")
        wr = step.get("wr")
        inputs = FifoInputs(
            reset=bool(step.get("reset", False)),
            wr_en=wr is not None,
            wr_data=int(wr) if wr is not None else 0,  # type: ignore[call-overload]
            rd_en=bool(step.get("rd", False)),
        )
        repeat = int(step.get("repeat", 1))  # type: ignore[call-overload]
        if repeat < 1:
            raise ValueError(f"{repeat=}")
        return [inputs] * repeat

    def set_item_inputs(self, item: FifoItem, index: int, status: FifoFlags) -> None:
        step = self.steps[index]
        item.reset = step.reset
        item.wr_en = step.wr_en
        item.wr_data = step.wr_data
        item.rd_en = step.rd_en
